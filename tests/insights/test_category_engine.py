import logging

import pytest

from services.insight_engine.conditions import AttachmentIs, Condition, above
from services.insight_engine.definitions import (
    AttachmentStyle,
    BigFiveTrait,
    Framework,
    InsightCategory,
    RuleGroup,
)
from services.insight_engine.engine import CategoryEngine
from services.insight_engine.models import Profile
from services.insight_engine.rules import InsightRule, InsightTemplate

FALLBACK = InsightTemplate(title="Fallback", description="Nothing matched.", explanation="Generic.", confidence=0.5)


def _template(title, description="Plain text.", confidence=0.8):
    return InsightTemplate(title=title, description=description, explanation="Because.", confidence=confidence)


def _rule(rule_id, condition, title, group=RuleGroup.BIG_FIVE, weight=0.3, description="Plain text."):
    return InsightRule(
        rule_id=rule_id,
        group=group,
        weight=weight,
        condition=condition,
        template=_template(title, description),
    )


class ExplodingCondition(Condition):
    def matches(self, profile):
        raise RuntimeError("boom")

    @property
    def frameworks(self):
        return (Framework.BIG_FIVE,)


def _engine(rules, **kwargs):
    kwargs.setdefault("id_generator", lambda category: f"{category.value}-fixed")
    return CategoryEngine(InsightCategory.STRENGTHS, rules, FALLBACK, **kwargs)


# --- Test Cases ---

def test_fired_rules_become_insights(scenario_profile):
    engine = _engine([
        _rule("openness", above(BigFiveTrait.OPENNESS, 75), "Curious", description="Openness {openness}%"),
    ])
    insights = engine.generate(scenario_profile)

    assert len(insights) == 1
    insight = insights[0]
    assert insight.id == "strengths-fixed"
    assert insight.title == "Curious"
    assert insight.description == "Openness 80%"
    assert insight.confidence == 0.8
    assert insight.source_frameworks == ["bigFive"]


def test_rules_are_ordered_by_group_before_ranking(scenario_profile):
    engine = _engine([
        _rule("big-five", above(BigFiveTrait.OPENNESS, 75), "Big Five", weight=0.9),
        _rule("attachment", AttachmentIs(AttachmentStyle.ANXIOUS), "Attachment",
              group=RuleGroup.ATTACHMENT, weight=0.1),
    ])
    assert [rule.rule_id for rule in engine.rules] == ["attachment", "big-five"]
    assert [insight.title for insight in engine.generate(scenario_profile)] == ["Attachment", "Big Five"]


def test_fallback_when_nothing_fires(scenario_profile):
    engine = _engine([_rule("never", AttachmentIs(AttachmentStyle.SECURE), "Secure")])
    insights = engine.generate(scenario_profile)

    assert [insight.title for insight in insights] == ["Fallback"]
    assert insights[0].confidence == 0.5
    assert insights[0].source_frameworks == []


def test_empty_profile_fallback_can_be_disabled(empty_profile):
    engine = _engine([], fallback_for_empty_profile=False)
    assert engine.generate(empty_profile) == []


def test_partial_profile_still_gets_fallback_when_disabled():
    engine = _engine([], fallback_for_empty_profile=False)
    profile = Profile.model_validate({"zodiac": {"sun": "aries"}})
    assert [insight.title for insight in engine.generate(profile)] == ["Fallback"]


def test_failing_rule_is_skipped_and_logged(scenario_profile, caplog):
    engine = _engine([
        _rule("broken", ExplodingCondition(), "Broken"),
        _rule("working", above(BigFiveTrait.OPENNESS, 75), "Working"),
    ])
    with caplog.at_level(logging.WARNING):
        insights = engine.generate(scenario_profile)

    assert [insight.title for insight in insights] == ["Working"]
    assert "broken" in caplog.text


def test_missing_placeholder_skips_only_that_rule(scenario_profile):
    engine = _engine([
        _rule("needs-mbti", above(BigFiveTrait.OPENNESS, 75), "Needs MBTI", description="Type {mbti}"),
        _rule("plain", above(BigFiveTrait.NEUROTICISM, 70), "Plain"),
    ])
    assert [insight.title for insight in engine.generate(scenario_profile)] == ["Plain"]


def test_output_never_exceeds_quota(full_profile):
    rules = [_rule(f"r{i}", above(BigFiveTrait.OPENNESS, 10), f"Title {i}") for i in range(6)]
    assert len(_engine(rules).generate(full_profile)) == 3
    assert len(_engine(rules, quota=2).generate(full_profile)) == 2
    assert len(_engine(rules, quota=7).generate(full_profile)) == 3


def test_quota_below_one_is_rejected():
    with pytest.raises(ValueError):
        _engine([], quota=0)


def test_generation_is_deterministic(full_profile):
    rules = [_rule(f"r{i}", above(BigFiveTrait.OPENNESS, 10), f"Title {i}", weight=0.3) for i in range(5)]
    engine = _engine(rules)
    first = engine.generate(full_profile)
    second = engine.generate(full_profile)
    assert [i.model_dump() for i in first] == [i.model_dump() for i in second]
    assert [i.title for i in first] == ["Title 0", "Title 1", "Title 2"]


def test_title_is_not_interpolated(scenario_profile):
    rule = InsightRule(
        rule_id="literal",
        group=RuleGroup.BIG_FIVE,
        weight=0.3,
        condition=above(BigFiveTrait.OPENNESS, 75),
        template=InsightTemplate(title="Scores {openness}", description="x", explanation="y", confidence=0.6),
    )
    assert _engine([rule]).generate(scenario_profile)[0].title == "Scores {openness}"


def test_rules_sharing_a_title_yield_one_insight(scenario_profile):
    engine = _engine([
        _rule("big-five-depth", above(BigFiveTrait.NEUROTICISM, 70), "Emotional Depth", weight=0.9,
              description="From Big Five."),
        _rule("curious", above(BigFiveTrait.OPENNESS, 75), "Curious", weight=0.5),
        _rule("attachment-depth", AttachmentIs(AttachmentStyle.ANXIOUS), "Emotional Depth",
              group=RuleGroup.ATTACHMENT, weight=0.2, description="From attachment."),
    ])
    insights = engine.generate(scenario_profile)

    assert [insight.title for insight in insights] == ["Emotional Depth", "Curious"]
    assert insights[0].description == "From attachment."
    assert insights[0].source_frameworks == ["attachmentStyle"]
