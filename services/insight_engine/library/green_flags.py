# services/insight_engine/library/green_flags.py
# What to look for in a partner, keyed on attachment, Big Five, MBTI and the
# top-ranked love language, with a few Enneagram-specific notes.

from ..conditions import AttachmentIs, EnneagramIs, MBTILetter, TopLoveLanguageIs, above, below
from ..definitions import AttachmentStyle, BigFiveTrait, LoveLanguage, RuleGroup
from ..rules import InsightRule, InsightTemplate

ATTACHMENT_WEIGHT = 0.55
ENNEAGRAM_WEIGHT = 0.1
LOVE_LANGUAGE_WEIGHT = 0.08

_ATTACHMENT_TEMPLATES = {
    AttachmentStyle.SECURE: InsightTemplate(
        title="Seek Another Secure Partner",
        description="Look for someone who is at ease with both intimacy and independence.",
        explanation="Securely attached people do best with another secure partner: someone who states needs directly, "
                    "skips the games, handles conflict constructively and is comfortable with closeness and space. "
                    "Secure-secure pairings report the highest satisfaction.",
        actionable="Signs to look for: clear talk about feelings and needs, comfort with commitment without rushing it, "
                   "disagreements that stay calm, healthy friendships and family ties, trust without control.",
        confidence=0.92,
    ),
    AttachmentStyle.ANXIOUS: InsightTemplate(
        title="Prioritize Secure, Consistent Partners",
        description="Look for partners who are consistently reassuring and emotionally available.",
        explanation="Anxious attachment settles with a partner who responds reliably. A secure partner can give that "
                    "consistency without feeling smothered, and feeling safe with them helps you grow more secure "
                    "yourself.",
        actionable="Signs to look for: consistent replies to texts and calls, comfort with emotional expression, "
                   "reassurance offered without being asked, patience with your need for connection, no pulling away "
                   "when you voice a need.",
        confidence=0.9,
    ),
    AttachmentStyle.AVOIDANT: InsightTemplate(
        title="Find Patient, Secure Partners",
        description="Look for partners who respect your need for space and still invite you closer.",
        explanation="Avoidant attachment does best with a secure partner who does not take your need for space "
                    "personally but also does not let you vanish. They are fine with a slower pace and make "
                    "vulnerability feel safe.",
        actionable="Signs to look for: space given without games, needs stated clearly without demands, a full life of "
                   "their own, gentle encouragement to share feelings without pressure.",
        confidence=0.88,
    ),
    AttachmentStyle.FEARFUL_AVOIDANT: InsightTemplate(
        title="Seek Exceptionally Secure, Patient Partners",
        description="Look for a deeply secure partner who can stay steady through push-pull cycles.",
        explanation="Fearful-avoidant attachment needs a partner who remains stable when you swing between closeness "
                    "and distance: patient, non-reactive and not personally wounded by your fears. Attachment work in "
                    "therapy alongside the relationship helps a great deal.",
        actionable="Signs to look for: calm consistency when you pull away, their own history of therapy or healing "
                   "work, boundaries set without harshness, comfort with complexity, support for your growth.",
        confidence=0.91,
    ),
}

_LOVE_LANGUAGE_TEMPLATES = {
    LoveLanguage.WORDS_OF_AFFIRMATION: InsightTemplate(
        title="Seek Verbally Expressive Partners",
        description="Look for partners who say their appreciation and affection out loud.",
        explanation="Your top love language is words of affirmation. You feel loved through spoken care, praise and "
                    "encouragement, so a partner who loves you silently may not register as loving at all.",
        actionable="Signs to look for: frequent, genuine compliments, feelings put into words, sweet texts or notes, "
                   "specific appreciation, an easy \"I love you\".",
        confidence=0.76,
    ),
    LoveLanguage.QUALITY_TIME: InsightTemplate(
        title="Prioritize Present, Attentive Partners",
        description="Look for partners who give undivided attention and make time together count.",
        explanation="Your top love language is quality time. Full attention is how you feel loved, so a distracted "
                    "partner reads as a rejection.",
        actionable="Signs to look for: the phone goes away during conversations, dates get planned, small rituals of "
                   "connection, real presence, one-on-one time made a priority.",
        confidence=0.78,
    ),
    LoveLanguage.ACTS_OF_SERVICE: InsightTemplate(
        title="Value Partners Who Show Love Through Actions",
        description="Look for partners who help out and lighten your load without being asked.",
        explanation="Your top love language is acts of service. You feel loved when someone makes your life easier, "
                    "and words without follow-through ring hollow.",
        actionable="Signs to look for: help offered unprompted, attention to what would ease your day, promises kept, "
                   "practical matters handled.",
        confidence=0.77,
    ),
    LoveLanguage.PHYSICAL_TOUCH: InsightTemplate(
        title="Seek Naturally Affectionate Partners",
        description="Look for partners who are comfortable with frequent physical affection.",
        explanation="Your top love language is physical touch. Hand-holding, hugs and intimacy are how love lands for "
                    "you, and physical distance feels like emotional distance.",
        actionable="Signs to look for: affection they initiate, comfort with touch in public, cuddling and closeness, "
                   "no flinching from your touch.",
        confidence=0.79,
    ),
    LoveLanguage.GIFTS: InsightTemplate(
        title="Appreciate Thoughtful, Symbolic Partners",
        description="Look for partners who show love through considered gifts and gestures.",
        explanation="Your top love language is receiving gifts. It is about the thought behind the object, a sign that "
                    "someone had you in mind, not about price.",
        actionable="Signs to look for: thoughtful rather than expensive gifts, remembered dates, small surprises, "
                   "respect for what gifts mean to you.",
        confidence=0.72,
    ),
}

ATTACHMENT_RULES = [
    InsightRule(
        rule_id=f"green-flag-attachment-{style.value}",
        group=RuleGroup.ATTACHMENT,
        weight=ATTACHMENT_WEIGHT,
        condition=AttachmentIs(style),
        template=template,
    )
    for style, template in _ATTACHMENT_TEMPLATES.items()
]

BIG_FIVE_RULES = [
    InsightRule(
        rule_id="green-flag-high-neuroticism",
        group=RuleGroup.BIG_FIVE,
        weight=0.28,
        condition=above(BigFiveTrait.NEUROTICISM, 65),
        template=InsightTemplate(
            title="Seek Emotionally Stable Partners",
            description="With neuroticism at {neuroticism}%, a calm, grounded partner will steady you.",
            explanation="An emotionally stable partner can help regulate intensity without brushing your feelings aside. "
                        "Two highly reactive people together can spiral.",
            actionable="Signs to look for: calm during conflict or stress, no catastrophizing alongside you, comfort "
                       "offered without invalidation, healthy coping habits.",
            confidence=0.82,
        ),
    ),
    InsightRule(
        rule_id="green-flag-low-conscientiousness",
        group=RuleGroup.BIG_FIVE,
        weight=0.25,
        condition=below(BigFiveTrait.CONSCIENTIOUSNESS, 40),
        template=InsightTemplate(
            title="Value Organized, Reliable Partners",
            description="Look for a more conscientious partner who complements your spontaneity.",
            explanation="You bring flexibility and adaptability; a partner who enjoys structure and follow-through can "
                        "carry the logistics. Each of you gets to lead with a strength.",
            actionable="Signs to look for: planning comes naturally to them, commitments are kept, your spontaneity is "
                       "channeled rather than judged.",
            confidence=0.75,
        ),
    ),
    InsightRule(
        rule_id="green-flag-high-openness",
        group=RuleGroup.BIG_FIVE,
        weight=0.27,
        condition=above(BigFiveTrait.OPENNESS, 70),
        template=InsightTemplate(
            title="Prioritize Intellectually Curious Partners",
            description="Look for partners who share your appetite for ideas, growth and new experiences.",
            explanation="An openness score of {openness}% means you need mental stimulation. A partner low in openness "
                        "may bore you, and you may feel like too much for them.",
            actionable="Signs to look for: enjoyment of deep conversations, eagerness to try new things with you, "
                       "ongoing learning, appreciation for unconventional ideas.",
            confidence=0.8,
        ),
    ),
    InsightRule(
        rule_id="green-flag-high-extraversion",
        group=RuleGroup.BIG_FIVE,
        weight=0.24,
        condition=above(BigFiveTrait.EXTRAVERSION, 65),
        template=InsightTemplate(
            title="Find Socially Energetic Partners",
            description="Look for partners who match your social energy or happily support it.",
            explanation="With extraversion at {extraversion}%, you need someone who either enjoys an active social life "
                        "or is secure enough to cheer yours on without coming every time.",
            actionable="Signs to look for: they like meeting people, keep their own friend groups, never guilt you for "
                       "going out, keep up with you on adventures.",
            confidence=0.73,
        ),
    ),
    InsightRule(
        rule_id="green-flag-low-extraversion",
        group=RuleGroup.BIG_FIVE,
        weight=0.24,
        condition=below(BigFiveTrait.EXTRAVERSION, 35),
        template=InsightTemplate(
            title="Seek Partners Who Value Quiet Connection",
            description="Look for partners who prefer depth over breadth in their social life.",
            explanation="Your introversion means you need a partner who values time together at home and does not push "
                        "constant socializing. Another introvert or a secure ambivert tends to fit well.",
            actionable="Signs to look for: enjoyment of quiet evenings, a few close friends, respect for your recharge "
                       "time, intimacy found in one-on-one connection.",
            confidence=0.74,
        ),
    ),
]

MBTI_RULES = [
    InsightRule(
        rule_id="green-flag-intuitive",
        group=RuleGroup.TYPE_PATTERN,
        weight=0.12,
        condition=MBTILetter(1, "N"),
        template=InsightTemplate(
            title="Seek Fellow Intuitive Types",
            description="Look for partners who think abstractly and enjoy exploring possibilities.",
            explanation="As an intuitive type you think in patterns and possibilities, while sensing types focus on "
                        "concrete detail. N-S pairings can work, but they often struggle to feel understood.",
            actionable="Signs to look for: enjoyment of ideas and theories, easy grasp of your metaphors, no constant "
                       "push to \"be practical\", a shared eye for the big picture.",
            confidence=0.7,
        ),
    ),
    InsightRule(
        rule_id="green-flag-feeling",
        group=RuleGroup.TYPE_PATTERN,
        weight=0.11,
        condition=MBTILetter(2, "F"),
        template=InsightTemplate(
            title="Value Emotional Intelligence in Partners",
            description="Look for partners who put emotional connection and empathy first.",
            explanation="As a feeling type you decide by values and impact on people. You need a partner who shares "
                        "that or deeply respects it; someone who calls emotions illogical will hurt you.",
            actionable="Signs to look for: they weigh how choices affect people, validate feelings they do not fully "
                       "share, and never mock emotional processing.",
            confidence=0.68,
        ),
    ),
]

_ENNEAGRAM_TEMPLATES = {
    "5": InsightTemplate(
        title="Respects Your Need for Space",
        description="Look for people who understand that you need time alone to process and recharge.",
        explanation="Type 5 Investigators do best with partners who do not take withdrawal personally and who value "
                    "the depth you bring when you come back.",
        actionable="Signs to look for: no sulking when you take time to think, curiosity about your ideas, a full "
                   "inner life of their own.",
        confidence=0.68,
    ),
    "4": InsightTemplate(
        title="Appreciates Your Authenticity",
        description="Look for partners who value emotional depth and authenticity as much as you do.",
        explanation="Type 4 Individualists need someone who engages with their feelings rather than dismissing them "
                    "and who enjoys a distinctive view of life.",
        actionable="Signs to look for: real questions about how you feel, comfort with intense conversations, "
                   "appreciation of what makes you different.",
        confidence=0.68,
    ),
    "6": InsightTemplate(
        title="Reliable and Trustworthy Presence",
        description="Look for partners whose words and actions line up over time.",
        explanation="Type 6 Loyalists build trust through consistency, and a partner who proves reliable helps you "
                    "feel secure.",
        actionable="Signs to look for: promises kept, patient answers to your questions, steady behavior whether or "
                   "not anyone is watching.",
        confidence=0.7,
    ),
}

ENNEAGRAM_RULES = [
    InsightRule(
        rule_id=f"green-flag-enneagram-{enneagram_type}",
        group=RuleGroup.TYPE_PATTERN,
        weight=ENNEAGRAM_WEIGHT,
        condition=EnneagramIs(enneagram_type),
        template=template,
    )
    for enneagram_type, template in _ENNEAGRAM_TEMPLATES.items()
]

LOVE_LANGUAGE_RULES = [
    InsightRule(
        rule_id=f"green-flag-love-language-{language.value}",
        group=RuleGroup.LOVE_LANGUAGE,
        weight=LOVE_LANGUAGE_WEIGHT,
        condition=TopLoveLanguageIs(language),
        template=template,
    )
    for language, template in _LOVE_LANGUAGE_TEMPLATES.items()
]

RULES = ATTACHMENT_RULES + BIG_FIVE_RULES + MBTI_RULES + ENNEAGRAM_RULES + LOVE_LANGUAGE_RULES
