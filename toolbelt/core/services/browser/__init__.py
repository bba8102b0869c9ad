from toolbelt.core.services.browser.service import BrowserService

__all__ = ['BrowserService']
