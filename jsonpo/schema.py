from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, StrictStr, ValidationError

T = TypeVar("T")


class SchemaError(ValueError):
    """Input JSON does not have the expected shape."""

    def __init__(self, label: str, errors: list[str]) -> None:
        self.label = label
        self.errors = list(errors)
        detail = "\n".join(f"  {error}" for error in self.errors)
        super().__init__(f"{label} does not match the expected schema:\n{detail}")


class _InputModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class WebExtMessage(_InputModel):
    """One entry of a WebExtensions ``messages.json`` file.

    https://developer.mozilla.org/en-US/docs/Mozilla/Add-ons/WebExtensions/API/i18n/Locale-Specific_Message_reference
    """

    message: StrictStr
    description: StrictStr | None = None
    placeholders: dict[StrictStr, Any] | None = None


class WebExtMessages(RootModel[dict[StrictStr, WebExtMessage]]):
    def __iter__(self) -> Iterator[str]:
        return iter(self.root)

    def __getitem__(self, key: str) -> WebExtMessage:
        return self.root[key]

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __len__(self) -> int:
        return len(self.root)

    def items(self):
        return self.root.items()

    def get(self, key: str) -> WebExtMessage | None:
        return self.root.get(key)


class RainbeamFile(_InputModel):
    name: StrictStr
    version: StrictStr
    data: dict[StrictStr, StrictStr]


@dataclass(frozen=True)
class ValidationOutcome(Generic[T]):
    label: str
    value: T | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    def unwrap(self) -> T:
        if not self.ok:
            raise SchemaError(self.label, self.errors)
        return self.value


def format_validation_errors(exc: ValidationError) -> list[str]:
    errors: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        errors.append(f"{location}: {message}" if location else message)
    return errors


def _validate(model: type[T], raw: object, label: str) -> ValidationOutcome[T]:
    try:
        value = model.model_validate(raw)
    except ValidationError as exc:
        return ValidationOutcome(label=label, errors=format_validation_errors(exc))
    return ValidationOutcome(label=label, value=value)


def validate_webext(raw: object, label: str = "WebExtension messages") -> ValidationOutcome[WebExtMessages]:
    return _validate(WebExtMessages, raw, label)


def validate_rainbeam(raw: object, label: str = "Rainbeam file") -> ValidationOutcome[RainbeamFile]:
    return _validate(RainbeamFile, raw, label)
