from gitexpress.api.routes.daily import DailyController
from gitexpress.api.routes.run import RunController
from gitexpress.api.routes.settings import SettingsController

__all__ = ["DailyController", "RunController", "SettingsController"]
