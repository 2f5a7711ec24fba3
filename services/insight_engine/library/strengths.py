# services/insight_engine/library/strengths.py
# Strength rules: high Big Five scores, secure attachment and rare combinations.

from ..conditions import AllOf, AttachmentIs, EnneagramIs, HumanDesignIs, MBTIIn, above, below
from ..definitions import AttachmentStyle, BigFiveTrait, HumanDesignType, RuleGroup
from ..rules import InsightRule, InsightTemplate

O = BigFiveTrait.OPENNESS
C = BigFiveTrait.CONSCIENTIOUSNESS
E = BigFiveTrait.EXTRAVERSION
A = BigFiveTrait.AGREEABLENESS
N = BigFiveTrait.NEUROTICISM

ATTACHMENT_RULES = [
    InsightRule(
        rule_id="strength-secure-attachment",
        group=RuleGroup.ATTACHMENT,
        weight=0.4,
        condition=AttachmentIs(AttachmentStyle.SECURE),
        template=InsightTemplate(
            title="Secure Attachment Foundation",
            description="Your secure attachment style is one of the most valuable things you bring to a relationship.",
            explanation="Only about half of adults are securely attached. You can be close without losing yourself, work "
                        "through conflict constructively and trust without being naive. That usually reflects caregiving "
                        "that taught you relationships are safe.",
            actionable="Model healthy patterns for the people around you. You can help anxious partners settle and "
                       "avoidant partners open up. Mentoring or relationship coaching may suit you.",
            confidence=0.92,
        ),
    ),
]

BIG_FIVE_RULES = [
    InsightRule(
        rule_id="strength-high-openness",
        group=RuleGroup.BIG_FIVE,
        weight=0.3,
        condition=above(O, 75),
        template=InsightTemplate(
            title="Creative and Intellectually Curious",
            description="An openness score of {openness}% makes you naturally inventive and quick to take up new ideas.",
            explanation="High openness goes with creativity, curiosity and comfort with ambiguity. You probably enjoy "
                        "new concepts, notice beauty and spot connections other people miss.",
            actionable="Look for roles built on problem-solving and fresh thinking. Share your unusual angles; they "
                       "carry weight. A creative hobby gives your imagination somewhere to go.",
            confidence=0.85,
        ),
    ),
    InsightRule(
        rule_id="strength-high-conscientiousness",
        group=RuleGroup.BIG_FIVE,
        weight=0.32,
        condition=above(C, 75),
        template=InsightTemplate(
            title="Reliable and Achievement-Oriented",
            description="A conscientiousness score of {conscientiousness}% makes you exceptionally dependable and focused on goals.",
            explanation="Conscientiousness is one of the strongest predictors of success in almost any field. You plan "
                        "ahead, keep commitments and hold high standards, so people learn to count on you.",
            actionable="Step into leadership where reliability matters. Mentor others in how you organize work. Watch "
                       "for burnout, since high standards can wear you down.",
            confidence=0.88,
        ),
    ),
    InsightRule(
        rule_id="strength-high-extraversion",
        group=RuleGroup.BIG_FIVE,
        weight=0.28,
        condition=above(E, 75),
        template=InsightTemplate(
            title="Energizing and Socially Confident",
            description="An extraversion score of {extraversion}% gives you natural charisma and social energy.",
            explanation="You lift the energy of a room and do well in social settings. Building networks, communicating "
                        "clearly and generating enthusiasm come easily, which matters in teaching, sales and leadership.",
            actionable="Choose work with plenty of interaction. Use your energy to build communities and connect people. "
                       "Set aside some quiet time for deep work.",
            confidence=0.82,
        ),
    ),
    InsightRule(
        rule_id="strength-high-agreeableness",
        group=RuleGroup.BIG_FIVE,
        weight=0.27,
        condition=above(A, 75),
        template=InsightTemplate(
            title="Empathetic and Collaborative",
            description="An agreeableness score of {agreeableness}% makes you naturally compassionate and team-minded.",
            explanation="You read other people's perspectives well and create harmony. People trust you and come to you "
                        "for advice, which is essential in care work, education and close-knit teams.",
            actionable="Put your empathy to work in helping roles or team leadership. Building consensus is a rare "
                       "skill. Hold boundaries so your kindness is not exploited.",
            confidence=0.8,
        ),
    ),
    InsightRule(
        rule_id="strength-low-neuroticism",
        group=RuleGroup.BIG_FIVE,
        weight=0.31,
        condition=below(N, 30),
        template=InsightTemplate(
            title="Emotionally Stable and Resilient",
            description="A neuroticism score of {neuroticism}% gives you unusual emotional stability under stress.",
            explanation="You stay calm under pressure, recover quickly from setbacks and think clearly while others "
                        "panic. That steadiness makes you dependable in a crisis.",
            actionable="Take on high-pressure roles where calm is an asset. Others will look to you when things get "
                       "chaotic, and you can use that steadiness to support more anxious people.",
            confidence=0.87,
        ),
    ),
    InsightRule(
        rule_id="strength-disciplined-creativity",
        group=RuleGroup.BIG_FIVE,
        weight=0.38,
        condition=AllOf((above(O, 75), above(C, 75))),
        template=InsightTemplate(
            title="Disciplined Creativity",
            description="High openness paired with high conscientiousness is a rare and powerful mix.",
            explanation="Creative people often struggle to finish, and disciplined people often struggle to invent. You "
                        "can generate new ideas and carry them through methodically, the pattern behind founders and "
                        "artists who actually ship.",
            actionable="Take on ambitious creative projects that need sustained effort. Entrepreneurship, creative "
                       "direction and research all reward vision joined to execution.",
            confidence=0.88,
        ),
    ),
    InsightRule(
        rule_id="strength-calm-compassion",
        group=RuleGroup.BIG_FIVE,
        weight=0.34,
        condition=AllOf((above(A, 75), below(N, 30))),
        template=InsightTemplate(
            title="Calm and Compassionate Presence",
            description="High agreeableness combined with emotional stability gives you a quiet, steady kind of strength.",
            explanation="You care about people without being swept away by their distress. That is the profile of "
                        "effective therapists, mediators and healers: you create safety and stay grounded.",
            actionable="Consider work in counseling, mediation, healthcare or crisis support, where you can hold space "
                       "for other people's pain without taking it on.",
            confidence=0.83,
        ),
    ),
    InsightRule(
        rule_id="strength-social-creativity",
        group=RuleGroup.BIG_FIVE,
        weight=0.3,
        condition=AllOf((above(O, 70), above(E, 70))),
        template=InsightTemplate(
            title="Socially Creative Innovator",
            description="Openness plus extraversion makes you a persuasive, charismatic innovator.",
            explanation="You have ideas and you can also sell them and bring people along. That combination carries "
                        "entrepreneurship, marketing, teaching and leadership.",
            actionable="Lead creative teams or new initiatives. Creative leadership and innovation consulting play to "
                       "your ability to excite people about something new.",
            confidence=0.8,
        ),
    ),
]

TYPE_PATTERN_RULES = [
    InsightRule(
        rule_id="strength-intuitive-secure",
        group=RuleGroup.TYPE_PATTERN,
        weight=0.36,
        condition=AllOf((MBTIIn(frozenset({"INFJ", "INTJ"})), AttachmentIs(AttachmentStyle.SECURE))),
        template=InsightTemplate(
            title="Insightful and Emotionally Grounded",
            description="Intuitive depth combined with secure attachment is an exceptionally rare pairing.",
            explanation="{mbti} is one of the rarest types (1-3% of the population), and secure attachment within it is "
                        "rarer still. You read patterns and people deeply while keeping your relationships healthy.",
            actionable="Trust your intuitive reads; they tend to be right. Counseling, strategy and leadership "
                       "development all need someone who is both perceptive and steady.",
            confidence=0.85,
        ),
    ),
    InsightRule(
        rule_id="strength-manifesting-generator-disciplined",
        group=RuleGroup.TYPE_PATTERN,
        weight=0.28,
        condition=AllOf((HumanDesignIs(HumanDesignType.MANIFESTING_GENERATOR), above(C, 70))),
        template=InsightTemplate(
            title="Efficient Multi-Passionate Achiever",
            description="Manifesting Generator energy with conscientiousness at {conscientiousness}% makes you remarkably efficient.",
            explanation="Manifesting Generators have sustainable energy and like to run several things at once. High "
                        "conscientiousness means you also finish them.",
            actionable="Let yourself follow several interests, and use your discipline to close each one out. Build "
                       "systems that can hold a varied workload.",
            confidence=0.78,
        ),
    ),
]

ENNEAGRAM_WEIGHT = 0.2

_ENNEAGRAM_TEMPLATES = {
    "3": InsightTemplate(
        title="Driven Achievement Motivation",
        description="Achiever energy makes you excellent at setting goals and reaching them.",
        explanation="Type 3s combine drive with adaptability, and that momentum tends to lift the people working "
                    "alongside them.",
        actionable="Pick goals that matter to you rather than ones that look good, and share the plan with your team.",
        confidence=0.72,
    ),
    "8": InsightTemplate(
        title="Protective Leadership Strength",
        description="Your Challenger nature gives you natural leadership and the nerve to stand up for others.",
        explanation="Type 8s are direct and decisive and willing to confront injustice, which makes them strong "
                    "advocates for people who cannot protect themselves.",
        actionable="Put your directness behind causes and people you believe in, and pair it with listening first.",
        confidence=0.72,
    ),
    "7": InsightTemplate(
        title="Optimistic Energy and Versatility",
        description="Your Enthusiast spirit brings possibility thinking into every situation.",
        explanation="Type 7s reframe setbacks quickly and keep morale up when things get hard.",
        actionable="Use your optimism to restart stalled projects, and keep a short list so your energy lands somewhere.",
        confidence=0.7,
    ),
}

ENNEAGRAM_RULES = [
    InsightRule(
        rule_id=f"strength-enneagram-{enneagram_type}",
        group=RuleGroup.TYPE_PATTERN,
        weight=ENNEAGRAM_WEIGHT,
        condition=EnneagramIs(enneagram_type),
        template=template,
    )
    for enneagram_type, template in _ENNEAGRAM_TEMPLATES.items()
]

RULES = ATTACHMENT_RULES + BIG_FIVE_RULES + TYPE_PATTERN_RULES + ENNEAGRAM_RULES
