# services/insight_engine/library/self_improvement.py
# Growth-area rules: insecure attachment, Big Five extremes that tend to get in
# the way, and contradictions between frameworks.

from ..conditions import AllOf, AttachmentIs, EnneagramIs, HumanDesignIs, MBTILetter, above, below
from ..definitions import AttachmentStyle, BigFiveTrait, HumanDesignType, RuleGroup
from ..rules import InsightRule, InsightTemplate

C = BigFiveTrait.CONSCIENTIOUSNESS
E = BigFiveTrait.EXTRAVERSION
A = BigFiveTrait.AGREEABLENESS
N = BigFiveTrait.NEUROTICISM

# --- Attachment ---

ATTACHMENT_RULES = [
    InsightRule(
        rule_id="self-improvement-attachment-anxious",
        group=RuleGroup.ATTACHMENT,
        weight=0.4,
        condition=AttachmentIs(AttachmentStyle.ANXIOUS),
        template=InsightTemplate(
            title="Building Emotional Self-Reliance",
            description="Your anxious attachment style suggests you may look to partners for more reassurance than they can sustainably give.",
            explanation="Anxious attachment often grows out of caregiving that was warm one day and unavailable the next. "
                        "It shows up as relationship worry and a fear of being left. Attachment patterns are not fixed, "
                        "and they shift with awareness and deliberate practice.",
            actionable="When anxiety spikes, practice self-soothing before reaching out. Keep a daily journal of what set the "
                       "feeling off. Attachment-focused therapy, such as EMDR or somatic work, is worth considering.",
            confidence=0.85,
        ),
    ),
    InsightRule(
        rule_id="self-improvement-attachment-avoidant",
        group=RuleGroup.ATTACHMENT,
        weight=0.4,
        condition=AttachmentIs(AttachmentStyle.AVOIDANT),
        template=InsightTemplate(
            title="Embracing Emotional Vulnerability",
            description="Your avoidant attachment style points to difficulty letting people get emotionally close.",
            explanation="Avoidant attachment usually forms as protection when emotional needs were dismissed or felt like "
                        "too much. Independence is a real strength, but deep connection asks for some vulnerability.",
            actionable="Share one honest feeling each day with someone you trust. Notice the urge to withdraw during "
                       "emotional conversations and try to stay for a few more minutes. Therapy can help map the pattern.",
            confidence=0.85,
        ),
    ),
    InsightRule(
        rule_id="self-improvement-attachment-fearful-avoidant",
        group=RuleGroup.ATTACHMENT,
        weight=0.4,
        condition=AttachmentIs(AttachmentStyle.FEARFUL_AVOIDANT),
        template=InsightTemplate(
            title="Navigating the Push-Pull Dynamic",
            description="Your fearful-avoidant attachment tends to pull you toward closeness and then push it away.",
            explanation="Fearful-avoidant attachment mixes the anxious and avoidant patterns, so wanting intimacy and "
                        "fearing it happen at the same time. It is often rooted in trauma or very unpredictable caregiving.",
            actionable="Look for a trauma-informed therapist with attachment experience. Use grounding techniques when you "
                       "feel flooded. Watch for the moment you start to pull away and name it to yourself.",
            confidence=0.9,
        ),
    ),
    InsightRule(
        rule_id="self-improvement-anxious-high-neuroticism",
        group=RuleGroup.ATTACHMENT,
        weight=0.45,
        condition=AllOf((AttachmentIs(AttachmentStyle.ANXIOUS), above(N, 70))),
        template=InsightTemplate(
            title="Managing Heightened Emotional Sensitivity",
            description="Anxious attachment together with a neuroticism score of {neuroticism}% makes emotional experiences run hot.",
            explanation="When anxious attachment meets high neuroticism, reactions can feel overwhelming. That is a "
                        "sensitive system rather than a flaw, and it responds well to specific regulation tools.",
            actionable="Build a short daily mindfulness habit; five minutes counts. Learn the RAIN technique (Recognize, "
                       "Allow, Investigate, Nurture) for intense moments. If anxiety is debilitating, ask a psychiatrist "
                       "about a medication evaluation.",
            confidence=0.88,
        ),
    ),
]

# --- Big Five ---

BIG_FIVE_RULES = [
    InsightRule(
        rule_id="self-improvement-low-conscientiousness",
        group=RuleGroup.BIG_FIVE,
        weight=0.3,
        condition=below(C, 40),
        template=InsightTemplate(
            title="Building Sustainable Organization Systems",
            description="A conscientiousness score of {conscientiousness}% suggests organization and follow-through take real effort for you.",
            explanation="Lower conscientiousness usually means spontaneity and flexibility, not laziness. Everyday life "
                        "still needs some structure, so the goal is a system that works with your tendencies.",
            actionable="Lean on external structure rather than willpower: phone reminders, habit stacking and visible cues. "
                       "Start with a single small habit. Body-doubling or an accountability partner can help.",
            confidence=0.75,
        ),
    ),
    InsightRule(
        rule_id="self-improvement-high-neuroticism",
        group=RuleGroup.BIG_FIVE,
        weight=0.32,
        condition=above(N, 70),
        template=InsightTemplate(
            title="Developing Emotional Regulation Skills",
            description="Your neuroticism score of {neuroticism}% means emotions arrive often and with force.",
            explanation="A highly responsive emotional system is tiring, and it is also the source of deep empathy and "
                        "awareness. The aim is better regulation, not feeling less.",
            actionable="Practice box breathing (4-4-4-4), progressive muscle relaxation or 5-4-3-2-1 grounding. Regular "
                       "exercise lowers baseline reactivity. CBT and DBT both teach these skills directly.",
            confidence=0.8,
        ),
    ),
    InsightRule(
        rule_id="self-improvement-low-agreeableness",
        group=RuleGroup.BIG_FIVE,
        weight=0.28,
        condition=below(A, 40),
        template=InsightTemplate(
            title="Balancing Assertiveness with Collaboration",
            description="An agreeableness score of {agreeableness}% suggests you put honesty and independence ahead of harmony.",
            explanation="Lower agreeableness tends to come with firm boundaries and directness. Close relationships "
                        "still need compromise and empathy, and you can build those skills without losing your edge.",
            actionable="Before replying in a disagreement, ask yourself what the other person might be feeling. Use "
                       "\"I\" statements. Pick the moments when the relationship matters more than being right.",
            confidence=0.72,
        ),
    ),
    InsightRule(
        rule_id="self-improvement-low-extraversion",
        group=RuleGroup.BIG_FIVE,
        weight=0.25,
        condition=below(E, 30),
        template=InsightTemplate(
            title="Managing Social Energy Strategically",
            description="With extraversion at {extraversion}%, social time costs you energy instead of giving it back.",
            explanation="Living as an introvert in a loud world is draining. You do not need to become more outgoing; "
                        "you need a rhythm of connection and solitude that fits your energy.",
            actionable="Block recovery time after social events. Tell people plainly when you need to recharge. Invest in "
                       "a few close friendships and choose gatherings built around shared interests.",
            confidence=0.7,
        ),
    ),
]

# --- MBTI and cross-framework ---

TYPE_PATTERN_RULES = [
    InsightRule(
        rule_id="self-improvement-extraversion-contradiction",
        group=RuleGroup.TYPE_PATTERN,
        weight=0.3,
        condition=AllOf((MBTILetter(0, "E"), below(E, 40))),
        template=InsightTemplate(
            title="Understanding Your Social Energy Paradox",
            description="Your {mbti} type reads as extraverted, but a Big Five extraversion of {extraversion}% reads as introverted.",
            explanation="This split often means some social settings, like trading ideas, light you up while general "
                        "socializing wears you down. You may be a social introvert, or you may have learned outgoing "
                        "habits that do not match your natural energy.",
            actionable="List which situations energize you and which drain you. Protect alone time even when you come "
                       "across as outgoing. Favor social plans tied to your interests.",
            confidence=0.7,
        ),
    ),
    InsightRule(
        rule_id="self-improvement-introversion-contradiction",
        group=RuleGroup.TYPE_PATTERN,
        weight=0.28,
        condition=AllOf((MBTILetter(0, "I"), above(E, 60))),
        template=InsightTemplate(
            title="Reconciling Your Social Identity",
            description="Your {mbti} type reads as introverted, but a Big Five extraversion of {extraversion}% reads as extraverted.",
            explanation="You may have adopted an introverted label because of social anxiety or earlier experiences while "
                        "actually drawing energy from people. Or you need people in specific, selective ways.",
            actionable="Try different kinds of social engagement and note how each one leaves you feeling. Ask whether "
                       "anxiety has shaped your self-image, and widen your comfort zone gradually.",
            confidence=0.68,
        ),
    ),
    InsightRule(
        rule_id="self-improvement-projector-low-conscientiousness",
        group=RuleGroup.TYPE_PATTERN,
        weight=0.3,
        condition=AllOf((HumanDesignIs(HumanDesignType.PROJECTOR), below(C, 40))),
        template=InsightTemplate(
            title="Creating Systems for Your Projector Energy",
            description="As a Projector with lower conscientiousness, you do best with structure that lives outside your head.",
            explanation="Projectors are not built for the steady output of Generators; rest and recognition matter. "
                        "Add lower conscientiousness and standard productivity advice tends to backfire.",
            actionable="Work in focused bursts with real rest in between. Wait to be invited before offering guidance. "
                       "Use visual systems and outside accountability. Your value lies in insight, not volume.",
            confidence=0.73,
        ),
    ),
]

# --- Enneagram ---

ENNEAGRAM_WEIGHT = 0.2

_ENNEAGRAM_TEMPLATES = {
    "2": InsightTemplate(
        title="Recognizing Your Own Needs",
        description="As a Helper you are good at meeting other people's needs and easily neglect your own.",
        explanation="Type 2s tend to focus so heavily on others that self-care slips, which leads to burnout.",
        actionable="Name one need of your own each day and voice it without apologizing. Your well-being counts as "
                   "much as anyone else's.",
        confidence=0.7,
    ),
    "1": InsightTemplate(
        title="Embracing Imperfection",
        description="Your high standards drive excellent work, but perfectionism is exhausting.",
        explanation="Type 1 Reformers carry a strong inner critic. Accepting imperfection lowers the stress it "
                    "creates.",
        actionable="Decide in advance what good enough looks like for a task and stop there. Track progress rather "
                   "than flaws.",
        confidence=0.7,
    ),
    "9": InsightTemplate(
        title="Expressing Your Opinions",
        description="Keeping the peace is valuable, but your own voice matters too.",
        explanation="Type 9 Peacemakers often play down their own wishes to avoid conflict and can lose track of "
                    "what they actually want.",
        actionable="Share one preference a day, especially when it differs from the room. Start with low-stakes "
                   "choices such as where to eat.",
        confidence=0.68,
    ),
}

ENNEAGRAM_RULES = [
    InsightRule(
        rule_id=f"self-improvement-enneagram-{enneagram_type}",
        group=RuleGroup.TYPE_PATTERN,
        weight=ENNEAGRAM_WEIGHT,
        condition=EnneagramIs(enneagram_type),
        template=template,
    )
    for enneagram_type, template in _ENNEAGRAM_TEMPLATES.items()
]

RULES = ATTACHMENT_RULES + BIG_FIVE_RULES + TYPE_PATTERN_RULES + ENNEAGRAM_RULES
