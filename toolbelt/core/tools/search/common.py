from typing import Any

from pydantic import Field

from toolbelt.core.tools.base import StatusOutput

TOO_MANY_REQUESTS = 'Too many requests. Please provide 50 or fewer requests in a single call.'


class SearchOutput(StatusOutput):
    data: Any = Field(default_factory=list, description='Search results')
