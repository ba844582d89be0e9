from .dispatcher import REDIRECT_STATE_KEY, REDIRECT_STATUS_CODE, RedirectDispatcher, location_header

__all__ = ["REDIRECT_STATE_KEY", "REDIRECT_STATUS_CODE", "RedirectDispatcher", "location_header"]
