"""Record types exchanged with the hosted backend store."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


class BackendStoreError(Exception):
    """Raised when the backend store experiences a transport or service error.

    Args:
        table: Table (or view) the failing request targeted.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the backend.
    """

    def __init__(self, table: str, message: str, status_code: int | None = None) -> None:
        self.table = table
        self.message = message
        self.status_code = status_code
        super().__init__(f"{table}: {message}")


@dataclass(frozen=True)
class ServiceProvider:
    """A network operator that serves one or more coverage areas."""

    id: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class Package:
    """A product offered during onboarding."""

    id: str
    package_code: str
    name: str
    speed: str = ""
    price: float = 0.0
    price_display: str = ""
    description: str = ""
    features: tuple[str, ...] = ()
    is_popular: bool = False
    is_active: bool = True
    sort_order: int = 0


@dataclass
class CustomerRecord:
    """Customer captured at the end of the onboarding flow."""

    name: str
    phone_number: str
    preferred_language: str = "en"
    coverage_available: bool = False
    gps_coordinates: str | None = None
    gps_location: str | None = None
    manual_location: str | None = None
    coverage_area_id: str | None = None
    status: str = "pending"
    current_journey_stage: str = "decision"
    selected_package_id: str | None = None
    selected_package_code: str | None = None
    selected_service_provider_id: str | None = None

    def to_row(self, system_input_process: str, acquisition_source: str) -> dict[str, Any]:
        """Build the insert payload, stamping consent and origin fields.

        ``gps_location`` is only sent when present; older schemas lack the column.
        """
        row: dict[str, Any] = {
            "name": self.name,
            "phone_number": self.phone_number,
            "preferred_language": self.preferred_language,
            "gps_coordinates": self.gps_coordinates,
            "manual_location": self.manual_location,
            "coverage_available": self.coverage_available,
            "coverage_area_id": self.coverage_area_id,
            "status": self.status,
            "current_journey_stage": self.current_journey_stage,
            "selected_package_id": self.selected_package_id,
            "selected_package_code": self.selected_package_code,
            "selected_service_provider_id": self.selected_service_provider_id,
            "consent_given": True,
            "consent_timestamp": datetime.now(UTC).isoformat(),
            "system_input_process": system_input_process,
            "acquisition_source": acquisition_source,
        }
        if self.gps_location:
            row["gps_location"] = self.gps_location
        return row


@dataclass
class InteractionRecord:
    """A single step of the onboarding conversation."""

    customer_id: str
    session_id: str
    interaction_type: str
    language_used: str = "en"
    message_text: str | None = None
    bot_response: str | None = None
    quick_reply_selected: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_row(self, system_input_process: str) -> dict[str, Any]:
        return {
            "customer_id": self.customer_id,
            "session_id": self.session_id,
            "interaction_type": self.interaction_type,
            "message_text": self.message_text,
            "bot_response": self.bot_response,
            "quick_reply_selected": self.quick_reply_selected,
            "metadata": self.metadata,
            "language_used": self.language_used,
            "system_input_process": system_input_process,
        }
