# services/insight_engine/conditions.py
# Predicates over a Profile used by the rule library. Each condition reports
# the frameworks it reads and evaluates to False when that data is missing.

from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple, Union

from .definitions import (
    AttachmentStyle,
    BigFiveTrait,
    Framework,
    HumanDesignType,
    LoveLanguage,
)
from .models import Profile


class Condition:
    """Base class; subclasses implement `matches` and `frameworks`."""

    def matches(self, profile: Profile) -> bool:
        raise NotImplementedError

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        raise NotImplementedError


# --- Big Five thresholds ---

@dataclass(frozen=True)
class TraitAbove(Condition):
    trait: BigFiveTrait
    threshold: int

    def matches(self, profile: Profile) -> bool:
        value = profile.trait(self.trait)
        return value is not None and value > self.threshold

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (Framework.BIG_FIVE,)


@dataclass(frozen=True)
class TraitBelow(Condition):
    trait: BigFiveTrait
    threshold: int

    def matches(self, profile: Profile) -> bool:
        value = profile.trait(self.trait)
        return value is not None and value < self.threshold

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (Framework.BIG_FIVE,)


# --- Categorical matches ---

@dataclass(frozen=True)
class AttachmentIs(Condition):
    style: AttachmentStyle

    def matches(self, profile: Profile) -> bool:
        return profile.attachment() == self.style

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (Framework.ATTACHMENT_STYLE,)


@dataclass(frozen=True)
class AttachmentIn(Condition):
    styles: FrozenSet[AttachmentStyle]

    def matches(self, profile: Profile) -> bool:
        return profile.attachment() in self.styles

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (Framework.ATTACHMENT_STYLE,)


@dataclass(frozen=True)
class MBTILetter(Condition):
    """Matches when the MBTI letter at `position` (0-3) equals `letter`."""
    position: int
    letter: str

    def matches(self, profile: Profile) -> bool:
        code = profile.mbti_code()
        return code is not None and code[self.position] == self.letter

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (Framework.MBTI,)


@dataclass(frozen=True)
class MBTIIn(Condition):
    codes: FrozenSet[str]

    def matches(self, profile: Profile) -> bool:
        return profile.mbti_code() in self.codes

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (Framework.MBTI,)


@dataclass(frozen=True)
class EnneagramIs(Condition):
    enneagram_type: str

    def matches(self, profile: Profile) -> bool:
        return profile.enneagram_type() == self.enneagram_type

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (Framework.ENNEAGRAM,)


@dataclass(frozen=True)
class HumanDesignIs(Condition):
    hd_type: HumanDesignType

    def matches(self, profile: Profile) -> bool:
        return profile.human_design_type() == self.hd_type

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (Framework.HUMAN_DESIGN,)


@dataclass(frozen=True)
class TopLoveLanguageIs(Condition):
    language: LoveLanguage

    def matches(self, profile: Profile) -> bool:
        return profile.top_love_language() == self.language

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (Framework.LOVE_LANGUAGES,)


# --- Conjunctions ---

@dataclass(frozen=True)
class AllOf(Condition):
    conditions: Tuple[Condition, ...]

    def matches(self, profile: Profile) -> bool:
        return all(condition.matches(profile) for condition in self.conditions)

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        seen = []
        for condition in self.conditions:
            for framework in condition.frameworks:
                if framework not in seen:
                    seen.append(framework)
        return tuple(seen)


@dataclass(frozen=True)
class AnyOf(Condition):
    conditions: Tuple[Condition, ...]

    def matches(self, profile: Profile) -> bool:
        return any(condition.matches(profile) for condition in self.conditions)

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return AllOf(self.conditions).frameworks


# --- Presence ---

@dataclass(frozen=True)
class FrameworkPresent(Condition):
    framework: Framework

    def matches(self, profile: Profile) -> bool:
        return profile.is_populated(self.framework)

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (self.framework,)


@dataclass(frozen=True)
class HasTopLoveLanguage(Condition):
    def matches(self, profile: Profile) -> bool:
        return profile.top_love_language() is not None

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return (Framework.LOVE_LANGUAGES,)


# Shorthands used by the library tables.
def above(trait: BigFiveTrait, threshold: int) -> TraitAbove:
    return TraitAbove(trait, threshold)


def below(trait: BigFiveTrait, threshold: int) -> TraitBelow:
    return TraitBelow(trait, threshold)


def render_context(profile: Profile) -> Dict[str, Union[int, str]]:
    """Values a template may interpolate; only data that is present is included."""
    context: Dict[str, Union[int, str]] = {}
    for trait in BigFiveTrait:
        value = profile.trait(trait)
        if value is not None:
            context[trait.value] = value
    mbti = profile.mbti_code()
    if mbti:
        context["mbti"] = mbti
    enneagram = profile.enneagram_type()
    if enneagram:
        context["enneagram"] = enneagram
    attachment = profile.attachment()
    if attachment:
        context["attachment_style"] = attachment.value
    top_language = profile.top_love_language()
    if top_language:
        context["top_love_language"] = top_language.value.replace("-", " ")
    hd_type = profile.human_design_type()
    if hd_type:
        context["human_design_type"] = hd_type.value.replace("-", " ")
    return context
