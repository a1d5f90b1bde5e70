"""Tests for conversions between the Notification DTO and domain model."""

from structlog.testing import capture_logs

from contracts.enums.notification import NotificationSeverity, NotificationStatus
from contracts.mappers.notification_mapper import (
    from_notification_model,
    from_notification_models,
    to_notification_model,
    to_notification_models,
)
from contracts.models.notification import Notification
from contracts.schemas.notification.notification_dto import NotificationDTO
from tests.factories import build_notification, build_notification_dto


class TestToNotificationModel:
    """Test suite for DTO to domain conversion."""

    def test_copies_every_field(self):
        """Test a field-by-field copy with enum conversion."""
        dto = build_notification_dto(severity="CRITICAL", status="PROCESSED")

        model = to_notification_model(dto)

        assert model == Notification(
            id=dto.id,
            created=dto.created,
            modified=dto.modified,
            category=dto.category,
            labels=dto.labels,
            content=dto.content,
            content_type=dto.content_type,
            description=dto.description,
            sender=dto.sender,
            severity=NotificationSeverity.CRITICAL,
            status=NotificationStatus.PROCESSED,
        )
        assert model.severity is NotificationSeverity.CRITICAL
        assert model.status is NotificationStatus.PROCESSED

    def test_empty_status_becomes_none(self):
        """Test that an unset status stays unset."""
        model = to_notification_model(build_notification_dto(status=""))

        assert model.status is None

    def test_does_not_share_labels(self):
        """Test that the model gets its own label list."""
        dto = build_notification_dto(labels=["door"])

        model = to_notification_model(dto)
        model.labels.append("window")

        assert dto.labels == ["door"]

    def test_unknown_enum_text_passes_through_with_warning(self):
        """Test that conversion never fails on unknown enum text."""
        dto = build_notification_dto(severity="LOW", status="CLOSED")

        with capture_logs() as logs:
            model = to_notification_model(dto)

        assert model.severity == "LOW"
        assert model.severity.is_known is False
        assert model.status == "CLOSED"
        assert [log["log_level"] for log in logs] == ["warning"]
        assert logs[0]["severity"] == "LOW"

    def test_known_enum_text_logs_nothing(self, valid_dto):
        """Test that valid conversions are silent."""
        with capture_logs() as logs:
            to_notification_model(valid_dto)

        assert logs == []


class TestFromNotificationModel:
    """Test suite for domain to DTO conversion."""

    def test_renders_enums_as_text(self):
        """Test that enumerations become their wire strings."""
        model = build_notification(
            severity=NotificationSeverity.MINOR, status=NotificationStatus.NEW
        )

        dto = from_notification_model(model)

        assert dto.severity == "MINOR"
        assert dto.status == "NEW"
        assert type(dto.severity) is str

    def test_none_status_becomes_empty(self):
        """Test that an unset status is omitted from the payload."""
        dto = from_notification_model(build_notification(status=None))

        assert dto.status == ""
        assert "status" not in dto.to_payload()

    def test_does_not_share_labels(self):
        """Test that the DTO gets its own label list."""
        model = build_notification(labels=["door"])

        dto = from_notification_model(model)
        model.labels.append("window")

        assert dto.labels == ["door"]


class TestRoundTrips:
    """Conversions are inverses for known enum values."""

    def test_dto_round_trip(self, valid_dto):
        """Test FromModel(ToModel(d)) == d."""
        assert from_notification_model(to_notification_model(valid_dto)) == valid_dto

    def test_model_round_trip(self):
        """Test ToModel(FromModel(t)) == t."""
        model = build_notification()

        assert to_notification_model(from_notification_model(model)) == model

    def test_minimal_dto_round_trip(self):
        """Test a DTO with only the required fields set."""
        dto = NotificationDTO(
            category="cat1", content="hello", sender="svc-a", severity="NORMAL"
        )

        assert from_notification_model(to_notification_model(dto)) == dto

    def test_unknown_enum_text_round_trips(self):
        """Test that unknown text survives a round trip unchanged."""
        dto = build_notification_dto(severity="LOW")

        with capture_logs():
            assert from_notification_model(to_notification_model(dto)) == dto


class TestSequenceConversions:
    """Sequence variants preserve order and length."""

    def test_to_models_preserves_order(self):
        """Test element-wise conversion of a DTO list."""
        dtos = [build_notification_dto() for _ in range(5)]

        models = to_notification_models(dtos)

        assert [m.id for m in models] == [d.id for d in dtos]
        assert models == [to_notification_model(d) for d in dtos]

    def test_from_models_preserves_order(self):
        """Test element-wise conversion of a model list."""
        models = [build_notification() for _ in range(5)]

        dtos = from_notification_models(models)

        assert [d.id for d in dtos] == [m.id for m in models]
        assert dtos == [from_notification_model(m) for m in models]

    def test_empty_input_gives_empty_list(self):
        """Test that empty input yields an empty list, not None."""
        assert to_notification_models([]) == []
        assert from_notification_models([]) == []

    def test_accepts_any_iterable(self):
        """Test conversion of a generator."""
        dtos = [build_notification_dto() for _ in range(3)]

        models = to_notification_models(dto for dto in dtos)

        assert len(models) == 3
