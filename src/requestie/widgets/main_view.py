"""Main view: the editor for whichever panel is selected."""

from textual.app import ComposeResult
from textual.containers import Vertical

from requestie.document import Document
from requestie.widgets.environment_view import EnvironmentView
from requestie.widgets.request_view import RequestView


class MainView(Vertical):
    """Stacks the request and environment views; only one is displayed."""

    def compose(self) -> ComposeResult:
        yield RequestView(id="request-view")
        yield EnvironmentView(id="environment-view")

    def show(self, document: Document) -> None:
        request_view = self.query_one("#request-view", RequestView)
        environment_view = self.query_one("#environment-view", EnvironmentView)
        request = document.selected_request()
        if request is not None:
            request_view.show(request)
            request_view.display = True
            environment_view.display = False
            return
        environment = document.selected_environment()
        if environment is not None:
            environment_view.show(environment)
        request_view.display = False
        environment_view.display = True
