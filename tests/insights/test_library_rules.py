import pytest

from services.insight_engine.conditions import render_context
from services.insight_engine.definitions import (
    AttachmentStyle,
    InsightCategory,
    LoveLanguage,
    RuleGroup,
)
from services.insight_engine.library import FALLBACKS, RULES_BY_CATEGORY
from services.insight_engine.library import green_flags, red_flags, self_improvement, strengths

ALL_RULES = [rule for rules in RULES_BY_CATEGORY.values() for rule in rules]


# --- Test Cases ---

def test_every_category_has_rules_and_a_fallback():
    for category in InsightCategory:
        assert RULES_BY_CATEGORY[category], f"{category.value} has no rules"
        assert FALLBACKS[category].confidence == 0.5


def test_rule_ids_are_unique():
    ids = [rule.rule_id for rule in ALL_RULES]
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize("rule", ALL_RULES, ids=lambda rule: rule.rule_id)
def test_rule_weights_and_confidences_are_in_range(rule):
    assert 0.0 < rule.weight <= 1.0
    assert 0.0 <= rule.template.confidence <= 1.0
    assert rule.sources, "every rule must read at least one framework"


@pytest.mark.parametrize("category", list(InsightCategory), ids=lambda category: category.value)
def test_tables_are_listed_in_group_order(category):
    priorities = [rule.priority for rule in RULES_BY_CATEGORY[category]]
    assert priorities == sorted(priorities)


@pytest.mark.parametrize("rule", ALL_RULES, ids=lambda rule: rule.rule_id)
def test_every_template_renders_with_a_complete_profile(rule, full_profile):
    text = rule.template.render(render_context(full_profile))
    assert text.title == rule.template.title
    assert "{" not in text.description
    assert "{" not in text.explanation


def test_fallbacks_render_without_profile_data():
    for template in FALLBACKS.values():
        assert template.render({}).title == template.title


@pytest.mark.parametrize("module", [green_flags, red_flags], ids=["green", "red"])
def test_partner_flags_cover_every_attachment_style_and_love_language(module):
    attachment_ids = {rule.rule_id for rule in module.ATTACHMENT_RULES}
    language_ids = {rule.rule_id for rule in module.LOVE_LANGUAGE_RULES}
    assert len(attachment_ids) == len(AttachmentStyle)
    assert len(language_ids) == len(LoveLanguage)
    assert all(rule.group == RuleGroup.ATTACHMENT for rule in module.ATTACHMENT_RULES)
    assert all(rule.group == RuleGroup.LOVE_LANGUAGE for rule in module.LOVE_LANGUAGE_RULES)


def test_love_language_rules_rank_last():
    for module in (green_flags, red_flags):
        heaviest_love_language = max(rule.weight for rule in module.LOVE_LANGUAGE_RULES)
        lightest_other = min(rule.weight for rule in module.RULES if rule.group != RuleGroup.LOVE_LANGUAGE)
        assert heaviest_love_language < lightest_other


@pytest.mark.parametrize("module", [self_improvement, strengths, green_flags, red_flags],
                         ids=lambda module: module.__name__.rsplit(".", 1)[-1])
def test_enneagram_rules_are_type_patterns(module):
    assert len(module.ENNEAGRAM_RULES) == 3
    for rule in module.ENNEAGRAM_RULES:
        assert rule.group == RuleGroup.TYPE_PATTERN
        assert rule.rule_id.rsplit("-", 1)[-1] in "123456789"
