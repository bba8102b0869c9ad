from toolbelt.core.services.log.service import get_log_service

__all__ = ['get_log_service']
