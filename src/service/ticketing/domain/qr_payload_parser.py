"""
QR payload parsing.

Tickets printed over the years carry three payload shapes. Each shape is a
form with a recognizer and an extractor; forms are tried in priority order and
the first one that recognizes the payload decides the serial. The parser never
rejects a non-empty payload: tickets issued under an unknown scheme fall
through to the raw form.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

import attrs

from src.platform.constant.api_endpoint import FRONTEND_ACTIVATE
from src.service.ticketing.domain.enum.scan_payload_form import ScanPayloadForm


ACTIVATE_MARKER = '/activate/'
LEGACY_SEPARATOR = ':'


class PayloadForm(ABC):
    kind: ClassVar[ScanPayloadForm]

    @staticmethod
    @abstractmethod
    def recognizes(raw: str) -> bool: ...

    @staticmethod
    @abstractmethod
    def extract(raw: str) -> str: ...


class UrlForm(PayloadForm):
    kind = ScanPayloadForm.URL

    @staticmethod
    def recognizes(raw: str) -> bool:
        return ACTIVATE_MARKER in raw

    @staticmethod
    def extract(raw: str) -> str:
        return raw.rsplit(ACTIVATE_MARKER, 1)[1]


class LegacyTripletForm(PayloadForm):
    """`event:sno:name` - the leading event identifier is discarded."""

    kind = ScanPayloadForm.LEGACY_TRIPLET

    @staticmethod
    def recognizes(raw: str) -> bool:
        return LEGACY_SEPARATOR in raw

    @staticmethod
    def extract(raw: str) -> str:
        return raw.split(LEGACY_SEPARATOR)[1]


class RawForm(PayloadForm):
    kind = ScanPayloadForm.RAW

    @staticmethod
    def recognizes(raw: str) -> bool:
        return True

    @staticmethod
    def extract(raw: str) -> str:
        return raw.strip()


PAYLOAD_FORMS: tuple[type[PayloadForm], ...] = (UrlForm, LegacyTripletForm, RawForm)


@attrs.define(frozen=True)
class ParsedScanPayload:
    form: ScanPayloadForm
    serial: str


def read_scan_payload(raw: str) -> Optional[ParsedScanPayload]:
    if not raw.strip():
        return None
    for form in PAYLOAD_FORMS:
        if form.recognizes(raw):
            return ParsedScanPayload(form=form.kind, serial=form.extract(raw))
    return None  # unreachable: RawForm recognizes everything


def parse_serial(raw: str) -> Optional[str]:
    parsed = read_scan_payload(raw)
    return parsed.serial if parsed else None


def build_activation_url(frontend_url: str, sno: str) -> str:
    """Canonical shareable/printable link; parses back to `sno` through UrlForm."""
    return frontend_url.rstrip('/') + FRONTEND_ACTIVATE.format(sno=sno)
