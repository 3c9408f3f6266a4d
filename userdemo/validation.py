"""Binding of request payloads with field checks and readable messages."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterable, Mapping, Tuple

_MESSAGES = {
    "required": "{label}为必填字段",
}


@dataclass(frozen=True)
class FieldError:
    """One failed check on one field."""

    field: str
    json_name: str
    label: str
    tag: str

    def translate(self) -> str:
        template = _MESSAGES.get(self.tag, "{label}校验失败")
        return template.format(label=self.label)


class ValidationFailed(ValueError):
    """Raised when bound values break one or more field checks."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors: Tuple[FieldError, ...] = tuple(errors)
        super().__init__("; ".join(e.translate() for e in self.errors))


def _meta(json_name: str, *, bits: int = 0, required: bool = False, label: str = "") -> dict:
    return {"json": json_name, "bits": bits, "required": required, "label": label}


@dataclass
class CreateUpdateCt:
    """Payload for creating or updating a user."""

    code: str = field(default="", metadata=_meta("code"))
    description: str = field(default="", metadata=_meta("description"))
    name: str = field(default="", metadata=_meta("name", required=True, label="名称"))
    name_fl: str = field(default="", metadata=_meta("name_fl"))
    name_full: str = field(default="", metadata=_meta("name_full"))
    sort: int = field(default=0, metadata=_meta("sort", bits=64))
    state: int = field(default=0, metadata=_meta("state", bits=8))

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CreateUpdateCt":
        """Bind a decoded JSON object.

        Raises ValueError for values of the wrong type, and ValidationFailed
        when a field check fails.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("payload must be a JSON object")
        folded = {}
        for key, value in payload.items():
            if isinstance(key, str):
                folded.setdefault(key.lower(), value)
        values = {}
        for f in fields(cls):
            key = f.metadata["json"]
            raw = payload[key] if key in payload else folded.get(key.lower())
            if raw is None:
                continue
            values[f.name] = _coerce(key, raw, f.metadata["bits"])
        bound = cls(**values)
        errors = [
            FieldError(
                field=f.name,
                json_name=f.metadata["json"],
                label=f.metadata["label"] or f.name,
                tag="required",
            )
            for f in fields(cls)
            if f.metadata["required"] and not getattr(bound, f.name)
        ]
        if errors:
            raise ValidationFailed(errors)
        return bound


def _coerce(key: str, raw: Any, bits: int) -> Any:
    if not bits:
        if not isinstance(raw, str):
            raise ValueError(f"{key}: expected a string, got {raw!r}")
        return raw
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{key}: expected an integer, got {raw!r}")
    limit = 1 << (bits - 1)
    if not -limit <= raw < limit:
        raise ValueError(f"{key}: {raw} does not fit in {bits} bits")
    return raw


def translate(error: BaseException) -> Dict[str, str]:
    """Map each failed field's JSON name to a readable message.

    Errors other than ValidationFailed give an empty mapping.
    """
    if not isinstance(error, ValidationFailed):
        return {}
    return {(e.json_name or e.field): e.translate() for e in error.errors}