# services/insight_engine/library/red_flags.py
# Partner patterns to be wary of, mirroring the green-flag tables.

from ..conditions import AttachmentIs, EnneagramIs, MBTILetter, TopLoveLanguageIs, above, below
from ..definitions import AttachmentStyle, BigFiveTrait, LoveLanguage, RuleGroup
from ..rules import InsightRule, InsightTemplate

ATTACHMENT_WEIGHT = 0.55
ENNEAGRAM_WEIGHT = 0.1
LOVE_LANGUAGE_WEIGHT = 0.08

_ATTACHMENT_TEMPLATES = {
    AttachmentStyle.SECURE: InsightTemplate(
        title="Watch for Emotional Unavailability",
        description="Be wary of partners who cannot return your emotional openness.",
        explanation="The main risk for a secure person is noticing insecure attachment in someone else only after you "
                    "are invested. Avoidance can pass for independence and anxiety for passion, and your patience can "
                    "stretch too far.",
        actionable="Warning signs: no talk of feelings or the future, distance that grows as you get closer, patchy "
                   "communication, a run of short relationships, your needs called \"too much\".",
        confidence=0.85,
    ),
    AttachmentStyle.ANXIOUS: InsightTemplate(
        title="Avoid Avoidant and Inconsistent Partners",
        description="Be very careful with partners who are emotionally distant or unpredictable.",
        explanation="Avoidant partners press directly on anxious attachment's deepest fears. The push and pull can feel "
                    "like chemistry when it is really an alarm system firing, and inconsistency keeps you anxious "
                    "instead of letting you settle.",
        actionable="Warning signs: hot then cold, dodged commitment talks, days without replies, ordinary needs "
                   "labelled needy, a history of leaving, no tolerance for your emotions.",
        confidence=0.92,
    ),
    AttachmentStyle.AVOIDANT: InsightTemplate(
        title="Watch for Anxious or Clingy Partners",
        description="Be wary of partners whose need for closeness feels overwhelming.",
        explanation="An anxious partner's need for reassurance can feel suffocating and trigger your urge to withdraw, "
                    "which feeds their anxiety in turn. You need someone who respects space rather than guilt-trips you "
                    "for wanting it.",
        actionable="Warning signs: a need for constant contact, upset over your alone time, a very fast start, no life "
                   "of their own, guilt about your independence.",
        confidence=0.88,
    ),
    AttachmentStyle.FEARFUL_AVOIDANT: InsightTemplate(
        title="Avoid Both Extremes: Avoidant and Anxious",
        description="Be wary of partners at either end of the attachment spectrum.",
        explanation="Avoidant partners stir your fear of abandonment and anxious partners stir your fear of being "
                    "engulfed. What you need is someone unusually secure, so be careful not to read drama or intensity "
                    "as connection.",
        actionable="Warning signs: either too distant or too intense, chaotic relationship history, strong reactions to "
                   "your push-pull cycles, no healing work of their own, a rollercoaster feel.",
        confidence=0.9,
    ),
}

_LOVE_LANGUAGE_TEMPLATES = {
    LoveLanguage.WORDS_OF_AFFIRMATION: InsightTemplate(
        title="Avoid Emotionally Unexpressive Partners",
        description="Be wary of partners who cannot or will not put affection into words.",
        explanation="With words of affirmation as your top love language, a quiet partner can leave you feeling unloved "
                    "even when they show care in other ways.",
        actionable="Warning signs: no \"I love you\" or compliments, mockery of your need to hear it, \"you should "
                   "just know\", discomfort with emotional language.",
        confidence=0.74,
    ),
    LoveLanguage.QUALITY_TIME: InsightTemplate(
        title="Watch for Distracted or Unavailable Partners",
        description="Be wary of partners who cannot give you their undivided attention.",
        explanation="With quality time as your top love language, a partner who is always on a phone or at work will "
                    "leave you feeling invisible and lonely in their company.",
        actionable="Warning signs: phone out whenever you are together, frequent cancellations, work or hobbies always "
                   "first, no plans for time together.",
        confidence=0.76,
    ),
    LoveLanguage.ACTS_OF_SERVICE: InsightTemplate(
        title="Avoid Partners Who Don't Follow Through",
        description="Be wary of partners who promise a lot and do little.",
        explanation="With acts of service as your top love language, affection that never turns into help will feel "
                    "unsupportive, and you may end up carrying everything.",
        actionable="Warning signs: broken promises, help only after repeated asks, love declared but not shown, "
                   "blindness to what needs doing.",
        confidence=0.75,
    ),
    LoveLanguage.PHYSICAL_TOUCH: InsightTemplate(
        title="Watch for Physically Distant Partners",
        description="Be wary of partners who are uncomfortable with physical affection.",
        explanation="With physical touch as your top love language, a partner who calls your need for touch clingy will "
                    "leave you feeling rejected; physical distance reads as emotional distance.",
        actionable="Warning signs: pulling away from touch, never initiating affection, mockery of your need for "
                   "closeness, discomfort with any public affection.",
        confidence=0.77,
    ),
    LoveLanguage.GIFTS: InsightTemplate(
        title="Avoid Partners Who Dismiss Thoughtfulness",
        description="Be wary of partners who miss the meaning behind gifts.",
        explanation="With receiving gifts as your top love language, a partner who calls it materialistic or forgets "
                    "important dates will leave you feeling uncared for. Thoughtfulness is the point, not money.",
        actionable="Warning signs: birthdays and anniversaries forgotten, mockery of your appreciation for gifts, no "
                   "thoughtful gestures, being called materialistic.",
        confidence=0.7,
    ),
}

ATTACHMENT_RULES = [
    InsightRule(
        rule_id=f"red-flag-attachment-{style.value}",
        group=RuleGroup.ATTACHMENT,
        weight=ATTACHMENT_WEIGHT,
        condition=AttachmentIs(style),
        template=template,
    )
    for style, template in _ATTACHMENT_TEMPLATES.items()
]

BIG_FIVE_RULES = [
    InsightRule(
        rule_id="red-flag-high-neuroticism",
        group=RuleGroup.BIG_FIVE,
        weight=0.28,
        condition=above(BigFiveTrait.NEUROTICISM, 65),
        template=InsightTemplate(
            title="Avoid Highly Anxious or Reactive Partners",
            description="With neuroticism at {neuroticism}%, a partner who is just as reactive will amplify your anxiety.",
            explanation="Two dysregulated people leave nobody to do the grounding. You need someone who stays calm when "
                        "you are anxious, not someone who panics with you.",
            actionable="Warning signs: they catastrophize alongside you, cannot settle you because they are spiraling "
                       "too, have frequent emotional crises, lack healthy coping habits.",
            confidence=0.83,
        ),
    ),
    InsightRule(
        rule_id="red-flag-high-openness",
        group=RuleGroup.BIG_FIVE,
        weight=0.26,
        condition=above(BigFiveTrait.OPENNESS, 70),
        template=InsightTemplate(
            title="Watch for Rigid or Close-Minded Partners",
            description="Be wary of partners who resist new ideas and cling to strict routines.",
            explanation="An openness score of {openness}% means you need exploration and stimulation. A very closed "
                        "partner may call you impractical or strange and push you to dim your curiosity.",
            actionable="Warning signs: your ideas brushed off as weird, refusal to try anything new, mockery of your "
                       "interests, pressure to settle down and be conventional.",
            confidence=0.78,
        ),
    ),
    InsightRule(
        rule_id="red-flag-low-conscientiousness",
        group=RuleGroup.BIG_FIVE,
        weight=0.25,
        condition=below(BigFiveTrait.CONSCIENTIOUSNESS, 40),
        template=InsightTemplate(
            title="Avoid Rigid or Judgmental Partners",
            description="Be wary of inflexible partners who criticize your spontaneity.",
            explanation="An organized partner can help you, but a perfectionistic or judgmental one will leave you "
                        "feeling that you constantly fall short.",
            actionable="Warning signs: constant criticism of your habits, no flexibility at all, being made to feel lazy, "
                       "everything done their way, attempts to fix you.",
            confidence=0.75,
        ),
    ),
    InsightRule(
        rule_id="red-flag-high-agreeableness",
        group=RuleGroup.BIG_FIVE,
        weight=0.27,
        condition=above(BigFiveTrait.AGREEABLENESS, 75),
        template=InsightTemplate(
            title="Watch for Partners Who Take Advantage",
            description="Be wary of partners who exploit your kindness and empathy.",
            explanation="Agreeableness at {agreeableness}% is a strength that also makes it easy to overlook warning "
                        "signs, because you empathize with people's struggles and look for their best side.",
            actionable="Warning signs: they consistently take more than they give, guilt-trip your boundaries, never "
                       "reciprocate care, call you selfish for basic limits.",
            confidence=0.8,
        ),
    ),
    InsightRule(
        rule_id="red-flag-high-extraversion",
        group=RuleGroup.BIG_FIVE,
        weight=0.23,
        condition=above(BigFiveTrait.EXTRAVERSION, 70),
        template=InsightTemplate(
            title="Avoid Extremely Introverted Partners",
            description="Be wary of partners who resent your social needs.",
            explanation="You need social contact to feel alive. A strongly introverted partner may find that draining and "
                        "come to resent your friendships, leaving you guilty for being yourself.",
            actionable="Warning signs: guilt for wanting to go out, refusal to meet your friends, complaints about your "
                       "social life, pressure to choose between them and everyone else.",
            confidence=0.72,
        ),
    ),
    InsightRule(
        rule_id="red-flag-low-extraversion",
        group=RuleGroup.BIG_FIVE,
        weight=0.23,
        condition=below(BigFiveTrait.EXTRAVERSION, 30),
        template=InsightTemplate(
            title="Watch for Overly Social or Demanding Partners",
            description="Be wary of partners who do not respect your need for solitude.",
            explanation="You recharge alone. A highly extraverted partner who does not understand that may read your "
                        "solitude as rejection, which breeds constant conflict.",
            actionable="Warning signs: alone time taken personally, a demand for nonstop plans, pressure to be more "
                       "social, the sense that introversion is a defect.",
            confidence=0.73,
        ),
    ),
]

MBTI_RULES = [
    InsightRule(
        rule_id="red-flag-intuitive",
        group=RuleGroup.TYPE_PATTERN,
        weight=0.12,
        condition=MBTILetter(1, "N"),
        template=InsightTemplate(
            title="Watch for Partners Who Dismiss Your Ideas",
            description="Be wary of very literal partners who find abstract thinking pointless.",
            explanation="As an intuitive type you think in possibilities. Some sensing types will keep telling you to be "
                        "realistic or stop overthinking, which leaves you feeling stifled.",
            actionable="Warning signs: you are always called unrealistic, your metaphors fall flat, your ideas are "
                       "dismissed unheard, everything must be concrete.",
            confidence=0.68,
        ),
    ),
    InsightRule(
        rule_id="red-flag-feeling",
        group=RuleGroup.TYPE_PATTERN,
        weight=0.11,
        condition=MBTILetter(2, "F"),
        template=InsightTemplate(
            title="Avoid Emotionally Dismissive Partners",
            description="Be wary of partners who mock or invalidate how you process emotions.",
            explanation="As a feeling type you weigh values and impact on people. Some thinking types write that off as "
                        "irrational, and you need someone who respects emotional intelligence even if they work differently.",
            actionable="Warning signs: being called too emotional, mockery of your empathy, \"logic\" used to dismiss "
                       "feelings, no validation at all.",
            confidence=0.7,
        ),
    ),
]

_ENNEAGRAM_TEMPLATES = {
    "1": InsightTemplate(
        title="Constant Criticism of Your Standards",
        description="Be wary of partners who mock your wish to improve things or call you uptight for having standards.",
        explanation="Type 1 Reformers need partners who respect their values rather than wearing down their "
                    "commitment to doing what is right.",
        actionable="Warning signs: pressure to lower your values, eye-rolling at your principles, your integrity "
                   "treated as a flaw.",
        confidence=0.68,
    ),
    "3": InsightTemplate(
        title="Values Image Over Substance",
        description="Be wary of partners focused on appearances and status more than on real connection.",
        explanation="Type 3 Achievers can slide into superficial competition with an image-focused partner and lose "
                    "touch with who they actually are.",
        actionable="Warning signs: constant talk of status symbols, more care for how the relationship looks than "
                   "how it feels, affection that depends on your achievements.",
        confidence=0.66,
    ),
    "8": InsightTemplate(
        title="Passive-Aggressive Behavior",
        description="Be wary of partners who avoid direct talk, say one thing and do another, or sulk instead of "
                    "speaking up.",
        explanation="Type 8 Challengers value directness and find passive-aggressive behavior disrespectful and "
                    "confusing.",
        actionable="Warning signs: silent treatment, sarcasm in place of honest complaints, agreement in the moment "
                   "followed by resentment later.",
        confidence=0.68,
    ),
}

ENNEAGRAM_RULES = [
    InsightRule(
        rule_id=f"red-flag-enneagram-{enneagram_type}",
        group=RuleGroup.TYPE_PATTERN,
        weight=ENNEAGRAM_WEIGHT,
        condition=EnneagramIs(enneagram_type),
        template=template,
    )
    for enneagram_type, template in _ENNEAGRAM_TEMPLATES.items()
]

LOVE_LANGUAGE_RULES = [
    InsightRule(
        rule_id=f"red-flag-love-language-{language.value}",
        group=RuleGroup.LOVE_LANGUAGE,
        weight=LOVE_LANGUAGE_WEIGHT,
        condition=TopLoveLanguageIs(language),
        template=template,
    )
    for language, template in _LOVE_LANGUAGE_TEMPLATES.items()
]

RULES = ATTACHMENT_RULES + BIG_FIVE_RULES + MBTI_RULES + ENNEAGRAM_RULES + LOVE_LANGUAGE_RULES
