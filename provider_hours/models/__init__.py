from .schedule import ProviderSchedule

__all__ = ["ProviderSchedule"]
