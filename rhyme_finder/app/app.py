"""Application wiring for the Rhyme Finder project."""

from __future__ import annotations

from typing import Optional

from rhyme_finder.app.services.datamuse import DatamuseClient, QueryMode
from rhyme_finder.app.services.query_service import QueryOutcome, WordQueryService
from rhyme_finder.app.services.result_formatter import WordResultFormatter
from rhyme_finder.app.settings import Settings
from rhyme_finder.app.ui.gradio import create_interface
from rhyme_finder.utils.logging_config import configure_logging
from rhyme_finder.utils.observability import get_logger


class RhymeFinderApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[DatamuseClient] = None,
        search_service: Optional[WordQueryService] = None,
        formatter: Optional[WordResultFormatter] = None,
    ) -> None:
        self.settings = settings or Settings.from_env()
        self._logger = get_logger(__name__).bind(component="app_facade")

        if search_service is not None:
            self.search_service = search_service
            self.client = search_service.client
        else:
            self.client = client or DatamuseClient(
                base_url=self.settings.api_url,
                timeout=self.settings.timeout,
                max_results=self.settings.max_results,
            )
            self.search_service = WordQueryService(client=self.client)
        self.formatter = formatter or WordResultFormatter()

        self._logger.info(
            "Application dependencies wired",
            context={
                "api_url": self.settings.api_url,
                "timeout": self.settings.timeout,
                "max_results": self.settings.max_results,
            },
        )

    # Public API ------------------------------------------------------------
    def search(self, term: str, mode: QueryMode = QueryMode.RHYME) -> QueryOutcome:
        return self.search_service.search(term, mode)

    def format_outcome(self, outcome: QueryOutcome) -> str:
        return self.formatter.format_outcome(outcome)

    def create_gradio_interface(self):
        return create_interface(self.search_service, self.formatter)

    def close(self) -> None:
        self.search_service.close()


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = RhymeFinderApp(settings)
    interface = app.create_gradio_interface()
    try:
        interface.launch(
            server_name=settings.host,
            server_port=settings.port,
            share=settings.share,
        )
    finally:
        app.close()


__all__ = ["RhymeFinderApp", "main"]
