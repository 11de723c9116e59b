from enum import Enum


class ActivationTransition(Enum):
    ACTIVATED = 'activated'  # inactive -> active
    DEACTIVATED = 'deactivated'  # active -> inactive

    @classmethod
    def from_echoed_state(cls, is_activated: bool) -> 'ActivationTransition':
        return cls.ACTIVATED if is_activated else cls.DEACTIVATED
