"""Pure functions for the panel selection cursor.

The selection is always exactly one of two panels: a request or an
environment, each identified by its index in the owning collection.  It is
modelled as two frozen variants rather than a pair of optional fields, so a
value can never point at both kinds at once.

On disk a selection is a single-key object, ``{"Request": 0}`` or
``{"Environment": 2}``.  The functions below compute the cursor that remains
valid after a removal without touching any collection themselves.
"""

from pydantic import BaseModel, ConfigDict, Field


class RequestPanel(BaseModel):
    """The request at ``index`` is being edited."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    index: int = Field(alias="Request", ge=0)


class EnvironmentPanel(BaseModel):
    """The environment at ``index`` is being edited."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    index: int = Field(alias="Environment", ge=0)


PanelSelection = RequestPanel | EnvironmentPanel


def is_valid(selection: PanelSelection, request_count: int, environment_count: int) -> bool:
    """Return True if the selection points at an existing item."""
    if isinstance(selection, RequestPanel):
        return 0 <= selection.index < request_count
    return 0 <= selection.index < environment_count


def after_request_removed(
    selection: PanelSelection, removed: int, remaining: int
) -> PanelSelection:
    """Return the selection after the request at ``removed`` was deleted.

    ``remaining`` is the request count after the deletion.  A selection
    below the removed row is unchanged, one above it shifts down so it keeps
    pointing at the same request, and a selection of the removed row moves
    to its neighbour.  With no requests left the first environment is
    selected instead.
    """
    if not isinstance(selection, RequestPanel):
        return selection
    if selection.index < removed:
        return selection
    if selection.index > removed:
        return RequestPanel(index=selection.index - 1)
    if remaining == 0:
        return EnvironmentPanel(index=0)
    return RequestPanel(index=min(removed, remaining - 1))


def after_environment_removed(
    selection: PanelSelection, removed: int, remaining: int
) -> PanelSelection:
    """Return the selection after the environment at ``removed`` was deleted.

    ``remaining`` is the environment count after the deletion and is always
    at least one.  A request selection, or an environment selection below
    the removed row, is still valid and is kept.  Otherwise the selection
    lands on whichever environment now sits at the removed position, clamped
    to the last one; a selection above the removed row is not shifted down
    with its environment.
    """
    if isinstance(selection, RequestPanel) or selection.index < removed:
        return selection
    return EnvironmentPanel(index=min(removed, remaining - 1))
