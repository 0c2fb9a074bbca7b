# eventbook/constants/confirmation.py
"""
Constants for reminder confirmation status values and booking roles.
"""


class ConfirmationStatus:
    """Reminder confirmation status values."""
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    DECLINED = "DECLINED"

    @classmethod
    def all_values(cls) -> list[str]:
        """Return all valid status values."""
        return [cls.PENDING, cls.CONFIRMED, cls.DECLINED]


class ConfirmationAction:
    """Actions a recipient may take on a confirmation link."""
    CONFIRM = "confirm"
    DECLINE = "decline"

    @classmethod
    def all_values(cls) -> list[str]:
        return [cls.CONFIRM, cls.DECLINE]

    @classmethod
    def is_valid(cls, action) -> bool:
        return action in cls.all_values()

    @classmethod
    def to_status(cls, action: str) -> str:
        return (
            ConfirmationStatus.CONFIRMED
            if action == cls.CONFIRM
            else ConfirmationStatus.DECLINED
        )


class BookingRole:
    """Role a user holds on a booking."""
    PARTICIPANT = "PARTICIPANT"
    VOLUNTEER = "VOLUNTEER"
