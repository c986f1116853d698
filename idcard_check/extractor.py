from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from idcard_check.config import Config
from idcard_check.reference_data import REGION_CODES
from idcard_check.validation import to_modern

logger = logging.getLogger(__name__)

MALE = "male"
FEMALE = "female"


@dataclass(frozen=True)
class IdCardInfo:
    """Facts encoded in a valid identity number."""

    number: str
    region_code: str
    birth_date: date
    gender: str

    @property
    def region_known(self) -> bool:
        return self.region_code in REGION_CODES

    def age(self, today: Optional[date] = None) -> int:
        """Completed years at ``today``."""
        today = today or date.today()
        born = self.birth_date
        return today.year - born.year - ((today.month, today.day) < (born.month, born.day))


def extract_info(
    value: object,
    today: Optional[date] = None,
    settings: Optional[Config] = None,
) -> Optional[IdCardInfo]:
    """Return an IdCardInfo for a valid legacy or modern number, else None."""
    number = to_modern(value, today=today, settings=settings)
    if number is None:
        return None
    try:
        birth = date(int(number[6:10]), int(number[10:12]), int(number[12:14]))
    except ValueError:
        # Check character matches but the date field is not a real date.
        logger.debug("Number %s*** has no valid birth date", number[:6])
        return None
    return IdCardInfo(
        number=number,
        region_code=number[:2],
        birth_date=birth,
        gender=MALE if int(number[16]) % 2 else FEMALE,
    )
