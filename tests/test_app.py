import gradio as gr

from rhyme_finder.app.app import RhymeFinderApp
from rhyme_finder.app.services.datamuse import DatamuseClient, QueryMode
from rhyme_finder.app.services.query_service import OutcomeStatus, WordQueryService
from rhyme_finder.app.settings import Settings


def test_app_wires_client_from_settings():
    app = RhymeFinderApp(
        Settings(api_url="http://localhost:9000", timeout=3.0, max_results=20)
    )
    try:
        assert isinstance(app.client, DatamuseClient)
        assert app.client.max_results == 20
        assert str(app.client.client.base_url).rstrip("/") == "http://localhost:9000"
        assert app.search_service.client is app.client
    finally:
        app.close()


def test_app_search_and_format(stub_client):
    app = RhymeFinderApp(Settings(), search_service=WordQueryService(client=stub_client))

    outcome = app.search("time")

    assert outcome.status is OutcomeStatus.OK
    assert app.format_outcome(outcome).startswith("### 1 syllable:")
    assert stub_client.calls == [("time", QueryMode.RHYME)]


def test_app_builds_gradio_interface(stub_client):
    app = RhymeFinderApp(Settings(), search_service=WordQueryService(client=stub_client))

    assert isinstance(app.create_gradio_interface(), gr.Blocks)

    app.close()
    assert stub_client.closed
