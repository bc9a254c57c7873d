"""Error container types read by the rendering layer.

An ``Errors`` instance holds every validation failure recorded for one subject
(a bean or form object). The upstream validation step fills it in; rendering
code only reads it.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MessageResolvable(Protocol):
    """Anything that carries enough information to be resolved to localized text.

    Attributes:
        codes: Message codes to try, most specific first
        arguments: Positional arguments for the message placeholders
        default_message: Text to use when no code resolves, or None
    """

    @property
    def codes(self) -> tuple[str, ...]: ...

    @property
    def arguments(self) -> tuple[Any, ...]: ...

    @property
    def default_message(self) -> str | None: ...


@dataclass(frozen=True)
class DefaultMessageResolvable:
    """Plain resolvable built from a code list, e.g. for a message argument."""

    codes: tuple[str, ...]
    arguments: tuple[Any, ...] = ()
    default_message: str | None = None

    @property
    def code(self) -> str | None:
        return self.codes[-1] if self.codes else None

    def __str__(self) -> str:
        return f"codes [{','.join(self.codes)}]; arguments [{','.join(map(str, self.arguments))}]"


@dataclass(frozen=True)
class ObjectError:
    """A failure not tied to any specific property (a global error).

    Attributes:
        object_name: Identifier of the object that failed validation
        codes: Message codes, most specific first
        arguments: Positional message arguments
        default_message: Fallback text when no code resolves
    """

    object_name: str
    codes: tuple[str, ...] = ()
    arguments: tuple[Any, ...] = ()
    default_message: str | None = None

    @property
    def code(self) -> str | None:
        """The least specific code, as used for the last-resort fallback."""
        return self.codes[-1] if self.codes else None

    def __str__(self) -> str:
        return f"Error in object '{self.object_name}': codes [{','.join(self.codes)}]"


@dataclass(frozen=True)
class FieldError(ObjectError):
    """A failure tied to one named property of a bean."""

    field: str = ""
    rejected_value: Any = None

    def __str__(self) -> str:
        return (
            f"Field error in object '{self.object_name}' on field '{self.field}': "
            f"rejected value [{self.rejected_value}]; codes [{','.join(self.codes)}]"
        )


@dataclass(eq=False)
class Errors:
    """All validation failures recorded for one subject, in insertion order."""

    object_name: str
    _errors: list[ObjectError] = field(default_factory=list, init=False, repr=False)

    # -------------------------------------------------------------------------
    # Recording (used by the upstream validation step and tests)
    # -------------------------------------------------------------------------

    def add_error(self, error: ObjectError) -> None:
        self._errors.append(error)

    def reject(
        self,
        code: str,
        arguments: tuple[Any, ...] | list[Any] = (),
        default_message: str | None = None,
    ) -> ObjectError:
        """Record a global error, expanding the code to ``code.objectName`` and ``code``."""
        error = ObjectError(
            object_name=self.object_name,
            codes=(f"{code}.{self.object_name}", code),
            arguments=tuple(arguments),
            default_message=default_message,
        )
        self._errors.append(error)
        return error

    def reject_value(
        self,
        field_name: str,
        code: str,
        rejected_value: Any = None,
        arguments: tuple[Any, ...] | list[Any] = (),
        default_message: str | None = None,
    ) -> FieldError:
        """Record a field error with codes from most to least specific."""
        error = FieldError(
            object_name=self.object_name,
            codes=(f"{code}.{self.object_name}.{field_name}", f"{code}.{field_name}", code),
            arguments=tuple(arguments),
            default_message=default_message,
            field=field_name,
            rejected_value=rejected_value,
        )
        self._errors.append(error)
        return error

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def all_errors(self) -> list[ObjectError]:
        return list(self._errors)

    @property
    def global_errors(self) -> list[ObjectError]:
        return [e for e in self._errors if not isinstance(e, FieldError)]

    @property
    def field_errors(self) -> list[FieldError]:
        return [e for e in self._errors if isinstance(e, FieldError)]

    def get_field_errors(self, field_name: str) -> list[FieldError]:
        return [e for e in self.field_errors if e.field == field_name]

    def get_field_error(self, field_name: str) -> FieldError | None:
        """Return the first error recorded for the field, or None."""
        for error in self.field_errors:
            if error.field == field_name:
                return error
        return None

    def has_errors(self) -> bool:
        return bool(self._errors)

    def has_field_errors(self, field_name: str) -> bool:
        return self.get_field_error(field_name) is not None

    @property
    def error_count(self) -> int:
        return len(self._errors)
