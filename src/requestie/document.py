"""The document: every request, every environment and the selected panel.

The document is the unit of persistence and the only mutable state in a
session.  Every operation below leaves these invariants intact:

- the selection points at an item that exists;
- there is always at least one environment;
- requests may run out, in which case an environment is selected;
- headers and environment values keep their order, and removing a row does
  not reorder the rest.

Out-of-range indices are rejected as no-ops and reported by returning False.
"""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from requestie.constants import (
    DEFAULT_ENVIRONMENT_NAME,
    DEFAULT_HEADERS,
    DEFAULT_REQUEST_NAME,
    DEFAULT_REQUEST_URL,
    NEW_ENVIRONMENT_NAME,
    NEW_REQUEST_NAME,
)
from requestie.domain.selection import (
    EnvironmentPanel,
    PanelSelection,
    RequestPanel,
    after_environment_removed,
    after_request_removed,
    is_valid,
)
from requestie.models import Environment, EnvironmentValue, Header, HttpMethod, Request

logger = logging.getLogger(__name__)


def _descending(indices: Iterable[int], length: int) -> list[int]:
    """Return the distinct in-range indices, largest first.

    Deleting in this order means no pending index is shifted by an earlier
    deletion.
    """
    return sorted({i for i in indices if 0 <= i < length}, reverse=True)


class Document(BaseModel):
    """Aggregate root owning all requests and environments."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    requests: list[Request]
    environments: list[Environment]
    selected: PanelSelection = Field(alias="selected_panel")

    @model_validator(mode="after")
    def _check_invariants(self) -> "Document":
        if not self.environments:
            raise ValueError("a document needs at least one environment")
        if not is_valid(self.selected, len(self.requests), len(self.environments)):
            raise ValueError(f"selected panel {self.selected!r} does not exist")
        return self

    # Selection

    def select_request(self, idx: int) -> bool:
        if not 0 <= idx < len(self.requests):
            return False
        self.selected = RequestPanel(index=idx)
        return True

    def select_environment(self, idx: int) -> bool:
        if not 0 <= idx < len(self.environments):
            return False
        self.selected = EnvironmentPanel(index=idx)
        return True

    def selected_request(self) -> Request | None:
        """Return the request being edited, or None if an environment is."""
        if isinstance(self.selected, RequestPanel):
            return self.requests[self.selected.index]
        return None

    def selected_environment(self) -> Environment | None:
        """Return the environment being edited, or None if a request is."""
        if isinstance(self.selected, EnvironmentPanel):
            return self.environments[self.selected.index]
        return None

    # Requests

    def add_request(self) -> int:
        """Append a blank request, select it, and return its index."""
        name = NEW_REQUEST_NAME.format(n=len(self.requests) + 1)
        self.requests.append(Request.blank(name))
        idx = len(self.requests) - 1
        self.selected = RequestPanel(index=idx)
        logger.debug("added request %d (%s)", idx, name)
        return idx

    def remove_request(self, idx: int) -> bool:
        """Remove a request and move the selection off it if needed."""
        if not 0 <= idx < len(self.requests):
            return False
        del self.requests[idx]
        self.selected = after_request_removed(self.selected, idx, len(self.requests))
        logger.debug("removed request %d", idx)
        return True

    def update_request(
        self,
        idx: int,
        *,
        name: str | None = None,
        url: str | None = None,
        method: HttpMethod | None = None,
        body: str | None = None,
    ) -> bool:
        """Overwrite the given fields of a request; None leaves a field as is."""
        if not 0 <= idx < len(self.requests):
            return False
        request = self.requests[idx]
        if name is not None:
            request.name = name
        if url is not None:
            request.url = url
        if method is not None:
            request.method = method
        if body is not None:
            request.body = body
        logger.debug("updated request %d", idx)
        return True

    # Headers

    def add_header(self, request_idx: int) -> bool:
        if not 0 <= request_idx < len(self.requests):
            return False
        self.requests[request_idx].headers.append(Header("", ""))
        logger.debug("added header to request %d", request_idx)
        return True

    def set_header(
        self,
        request_idx: int,
        header_idx: int,
        *,
        name: str | None = None,
        value: str | None = None,
    ) -> bool:
        if not 0 <= request_idx < len(self.requests):
            return False
        headers = self.requests[request_idx].headers
        if not 0 <= header_idx < len(headers):
            return False
        current = headers[header_idx]
        headers[header_idx] = Header(
            current.name if name is None else name,
            current.value if value is None else value,
        )
        logger.debug("set header %d of request %d", header_idx, request_idx)
        return True

    def remove_header(self, request_idx: int, header_idx: int) -> bool:
        return self.remove_headers(request_idx, [header_idx]) > 0

    def remove_headers(self, request_idx: int, header_indices: Iterable[int]) -> int:
        """Remove several headers at once and return how many were removed.

        Indices refer to positions before any removal; duplicates and
        out-of-range entries are ignored.
        """
        if not 0 <= request_idx < len(self.requests):
            return 0
        headers = self.requests[request_idx].headers
        doomed = _descending(header_indices, len(headers))
        for i in doomed:
            del headers[i]
        logger.debug("removed %d header(s) from request %d", len(doomed), request_idx)
        return len(doomed)

    # Environments

    def add_environment(self) -> int:
        """Append an empty environment, select it, and return its index."""
        name = NEW_ENVIRONMENT_NAME.format(n=len(self.environments) + 1)
        self.environments.append(Environment(name=name, values=[]))
        idx = len(self.environments) - 1
        self.selected = EnvironmentPanel(index=idx)
        logger.debug("added environment %d (%s)", idx, name)
        return idx

    def rename_environment(self, idx: int, name: str) -> bool:
        if not 0 <= idx < len(self.environments):
            return False
        self.environments[idx].name = name
        logger.debug("renamed environment %d", idx)
        return True

    def remove_environment(self, idx: int) -> bool:
        """Remove an environment unless it is the last one."""
        if len(self.environments) <= 1:
            logger.debug("refused to remove the last environment")
            return False
        if not 0 <= idx < len(self.environments):
            return False
        del self.environments[idx]
        self.selected = after_environment_removed(self.selected, idx, len(self.environments))
        logger.debug("removed environment %d", idx)
        return True

    # Environment values

    def add_environment_value(self, env_idx: int) -> bool:
        if not 0 <= env_idx < len(self.environments):
            return False
        self.environments[env_idx].values.append(EnvironmentValue("", ""))
        logger.debug("added value to environment %d", env_idx)
        return True

    def set_environment_value(
        self,
        env_idx: int,
        value_idx: int,
        *,
        key: str | None = None,
        value: str | None = None,
    ) -> bool:
        if not 0 <= env_idx < len(self.environments):
            return False
        values = self.environments[env_idx].values
        if not 0 <= value_idx < len(values):
            return False
        current = values[value_idx]
        values[value_idx] = EnvironmentValue(
            current.key if key is None else key,
            current.value if value is None else value,
        )
        logger.debug("set value %d of environment %d", value_idx, env_idx)
        return True

    def remove_environment_value(self, env_idx: int, value_idx: int) -> bool:
        return self.remove_environment_values(env_idx, [value_idx]) > 0

    def remove_environment_values(self, env_idx: int, value_indices: Iterable[int]) -> int:
        """Remove several values at once; see ``remove_headers``."""
        if not 0 <= env_idx < len(self.environments):
            return 0
        values = self.environments[env_idx].values
        doomed = _descending(value_indices, len(values))
        for i in doomed:
            del values[i]
        logger.debug("removed %d value(s) from environment %d", len(doomed), env_idx)
        return len(doomed)


def default_document() -> Document:
    """Return the document used when nothing has been saved yet."""
    return Document(
        requests=[
            Request(
                name=DEFAULT_REQUEST_NAME,
                url=DEFAULT_REQUEST_URL,
                method=HttpMethod.GET,
                headers=[Header(name, value) for name, value in DEFAULT_HEADERS],
                body="",
            )
        ],
        environments=[Environment(name=DEFAULT_ENVIRONMENT_NAME, values=[])],
        selected=RequestPanel(index=0),
    )
