"""
Typed payloads stored in Action.result and Action.details.

The database keeps plain JSON (camelCase keys, as the frontend reads it);
these dataclasses are the only way the API builds or validates it. Each
ActionType has exactly one result shape.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .models import ActionType


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"'{key}' deve ser um texto")
    return value


def _str_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"'{key}' deve ser uma lista de textos")
    return list(value)


def _check_keys(data: Dict[str, Any], allowed: set, label: str):
    unknown = set(data) - allowed
    if unknown:
        raise ValueError(
            f"Campos inválidos para {label}: {', '.join(sorted(unknown))}")


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass
class CreateContentResult:
    """Generated post: image, title, body and hashtags."""
    image_url: Optional[str] = None
    title: Optional[str] = None
    body: Optional[str] = None
    hashtags: List[str] = field(default_factory=list)
    original_image: Optional[str] = None

    KEYS = {'imageUrl', 'title', 'body', 'hashtags', 'originalImage'}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CreateContentResult':
        _check_keys(data, cls.KEYS, ActionType.CREATE_CONTENT.label)
        return cls(
            image_url=_optional_str(data, 'imageUrl'),
            title=_optional_str(data, 'title'),
            body=_optional_str(data, 'body'),
            hashtags=_str_list(data, 'hashtags'),
            original_image=_optional_str(data, 'originalImage'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            'imageUrl': self.image_url,
            'title': self.title,
            'body': self.body,
            'hashtags': list(self.hashtags),
            'originalImage': self.original_image,
        })


@dataclass
class ReviewContentResult:
    """Feedback produced when reviewing an existing piece of content."""
    feedback: Optional[str] = None
    original_image: Optional[str] = None

    KEYS = {'feedback', 'originalImage'}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReviewContentResult':
        _check_keys(data, cls.KEYS, ActionType.REVIEW_CONTENT.label)
        return cls(
            feedback=_optional_str(data, 'feedback'),
            original_image=_optional_str(data, 'originalImage'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            'feedback': self.feedback,
            'originalImage': self.original_image,
        })


@dataclass
class PlanContentResult:
    """Content calendar produced by the planning flow."""
    plan: Optional[str] = None

    KEYS = {'plan'}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PlanContentResult':
        _check_keys(data, cls.KEYS, ActionType.PLAN_CONTENT.label)
        return cls(plan=_optional_str(data, 'plan'))

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({'plan': self.plan})


ActionResult = Union[CreateContentResult, ReviewContentResult, PlanContentResult]

RESULT_TYPES = {
    ActionType.CREATE_CONTENT: CreateContentResult,
    ActionType.REVIEW_CONTENT: ReviewContentResult,
    ActionType.PLAN_CONTENT: PlanContentResult,
}


def parse_result(action_type: str, data: Optional[Dict[str, Any]]) -> Optional[ActionResult]:
    """Build the typed result for an action type; None stays None."""
    try:
        result_class = RESULT_TYPES[ActionType(action_type)]
    except ValueError:
        raise ValueError(f"Tipo de ação desconhecido: {action_type}")

    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError("O resultado deve ser um objeto")
    return result_class.from_dict(data)


@dataclass
class GenerationDetails:
    """Original generation request parameters."""
    prompt: Optional[str] = None
    objective: Optional[str] = None
    platform: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['GenerationDetails']:
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ValueError("Os detalhes devem ser um objeto")
        extra = {
            key: value for key, value in data.items()
            if key not in ('prompt', 'objective', 'platform')
        }
        return cls(
            prompt=_optional_str(data, 'prompt'),
            objective=_optional_str(data, 'objective'),
            platform=_optional_str(data, 'platform'),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.extra,
            **_drop_none({
                'prompt': self.prompt,
                'objective': self.objective,
                'platform': self.platform,
            }),
        }
