"""Tests for domain/ports/field.py."""

from fieldcheck.domain.ports.field import BindableField, field_label
from fieldcheck.infrastructure.fields import InMemoryField
from tests.factories import RecordingField


class _Unlabeled:
    value = "x"

    def mark_valid(self) -> None:
        pass

    def mark_invalid(self, message: str | None) -> None:
        pass


class TestBindableField:
    """Tests for BindableField protocol."""

    def test_in_memory_field_conforms(self) -> None:
        assert isinstance(InMemoryField(), BindableField)

    def test_recording_field_conforms(self) -> None:
        assert isinstance(RecordingField(), BindableField)

    def test_object_without_feedback_does_not_conform(self) -> None:
        class ValueOnly:
            value = "x"

        assert not isinstance(ValueOnly(), BindableField)


class TestFieldLabel:
    """Tests for field_label helper."""

    def test_returns_label(self) -> None:
        assert field_label(InMemoryField(label="Password")) == "Password"

    def test_missing_label_is_empty(self) -> None:
        assert field_label(_Unlabeled()) == ""

    def test_non_string_label_is_empty(self) -> None:
        field = _Unlabeled()
        field.label = 42  # type: ignore[attr-defined]
        assert field_label(field) == ""
