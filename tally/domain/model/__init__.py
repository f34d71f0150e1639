"""Domain model entities for Tally."""

from tally.domain.model.contract import Contract
from tally.domain.model.document import Document
from tally.domain.model.letter_of_credit import LetterOfCredit, VesselLetterOfCredit
from tally.domain.model.request import Request
from tally.domain.model.vessel import Vessel
from tally.domain.model.vote import DocumentVoteGroup, Vote

__all__ = [
    "Contract",
    "Document",
    "DocumentVoteGroup",
    "LetterOfCredit",
    "Request",
    "Vessel",
    "VesselLetterOfCredit",
    "Vote",
]
