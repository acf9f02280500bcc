from enum import Enum

class TechnicalAck(Enum):
    """
    Controls the generation of TA1 technical acknowledgments.
    Read by the acknowledgment generator; the error context model never consults it.
    """
    # Always generate a technical acknowledgment.
    ENFORCE = "enforce"
    # Generate according to the ISA14 flag (X12) or UNB9 flag (EDIFACT).
    DEFAULT = "default"
    # Never generate a technical acknowledgment.
    SUPPRESS = "suppress"

    def requires_ack(self, ack_requested: bool) -> bool:
        """
        Resolves the policy against the acknowledgment flag sent in the interchange header.

        Args:
            ack_requested: True if the sender asked for an acknowledgment (ISA14 == "1")

        Returns:
            True if a technical acknowledgment must be generated
        """
        if self is TechnicalAck.ENFORCE:
            return True
        if self is TechnicalAck.SUPPRESS:
            return False
        return ack_requested
