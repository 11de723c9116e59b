from enum import StrEnum


class ScanPayloadForm(StrEnum):
    URL = 'url'  # <origin>/activate/{sno}
    LEGACY_TRIPLET = 'legacy_triplet'  # {event}:{sno}:{name}
    RAW = 'raw'  # bare serial
