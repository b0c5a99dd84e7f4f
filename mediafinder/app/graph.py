from typing import Any, Callable, Dict, List, Optional
from langgraph.graph import StateGraph, END
from rich.console import Console
from rich.markup import escape

from .prompt import clear_screen, prompt_search_term, prompt_selection
from .state import GraphState
from ..adapters.tmdb import DETAIL_MEDIA_TYPES, TMDBAdapter
from ..core.config import Settings
from ..core.errors import TMDBRequestError
from ..core.logger import SearchLogger
from ..core.normalize import ResultNormalizer, select_item
from ..core.presenter import Presenter

SelectFn = Callable[[List[str], Console], int]
TermFn = Callable[[Console], str]


class MediaSearchGraph:
    def __init__(self, settings: Settings, logger: Optional[SearchLogger] = None, console: Optional[Console] = None,
                 select_fn: SelectFn = prompt_selection, term_fn: TermFn = prompt_search_term,
                 adapter: Optional[TMDBAdapter] = None):
        self.settings = settings
        self.console = console or Console()
        self.logger = logger or SearchLogger(log_dir=None, console=self.console)
        self.select_fn = select_fn
        self.term_fn = term_fn
        self.tmdb = adapter or TMDBAdapter(
            token=settings.token,
            base_url=settings.base_url,
            language=settings.language,
            timeout=settings.timeout,
            proxy=settings.proxy
        )
        self.presenter = Presenter(self.console, site_url=settings.site_url)

    def create_graph(self) -> StateGraph:
        """Create the search -> select -> detail workflow."""
        workflow = StateGraph(GraphState)

        workflow.add_node("parse_input", self.parse_input_node)
        workflow.add_node("search", self.search_node)
        workflow.add_node("normalize", self.normalize_node)
        workflow.add_node("report_empty", self.report_empty_node)
        workflow.add_node("select", self.select_node)
        workflow.add_node("fetch_details", self.fetch_details_node)
        workflow.add_node("present", self.present_node)

        workflow.set_entry_point("parse_input")
        workflow.add_edge("parse_input", "search")
        workflow.add_edge("search", "normalize")
        workflow.add_conditional_edges(
            "normalize",
            self.route_after_normalize,
            {"select": "select", "empty": "report_empty"}
        )
        workflow.add_edge("report_empty", END)
        workflow.add_edge("select", "fetch_details")
        workflow.add_edge("fetch_details", "present")
        workflow.add_edge("present", END)

        return workflow

    def run(self, input_data: Dict[str, Any]) -> Dict[str, Any]:
        """Compile the workflow and run it once."""
        app = self.create_graph().compile()
        return app.invoke(GraphState(input=input_data))

    def parse_input_node(self, state: GraphState) -> Dict[str, Any]:
        """Resolve the search term, prompting for it when none was given."""
        input_data = dict(state.input)

        if input_data.get("query") is None:
            clear_screen(self.console)
            input_data["query"] = self.term_fn(self.console)

        self.logger.log_input(input_data)
        return {"input": input_data}

    def search_node(self, state: GraphState) -> Dict[str, Any]:
        """Run the multi search; a failed request counts as zero hits."""
        query = state.input.get("query", "")

        try:
            hits = self.tmdb.search_multi(query)
        except TMDBRequestError as e:
            self.logger.log_error(e)
            return {"hits": [], "errors": [*state.errors, str(e)]}

        self.logger.log_search(hits)
        return {"hits": hits}

    def normalize_node(self, state: GraphState) -> Dict[str, Any]:
        items = ResultNormalizer.normalize_hits(state.hits)
        self.logger.log_normalize(items)
        return {"items": items}

    def route_after_normalize(self, state: GraphState) -> str:
        return "select" if state.items else "empty"

    def report_empty_node(self, state: GraphState) -> Dict[str, Any]:
        query = state.input.get("query", "")
        message = f'No results found for "{query}".'
        self.console.print(escape(message), highlight=False)
        self.logger.logger.info(message)
        return {"selected": None}

    def select_node(self, state: GraphState) -> Dict[str, Any]:
        """Let the user pick one normalized item."""
        if state.input.get("first"):
            index = 0
        else:
            index = self.select_fn([item.label for item in state.items], self.console)

        selected = select_item(state.items, index)
        self.logger.log_selection(index, selected)
        return {"selected": selected}

    def fetch_details_node(self, state: GraphState) -> Dict[str, Any]:
        """Fetch type-specific details; a failed request leaves them empty."""
        selected = state.selected

        if selected.media_type not in DETAIL_MEDIA_TYPES:
            self.logger.log_info(f"No details available for {selected.media_type or 'unknown'} results", level="verbose")
            self.logger.log_fetch(selected, None)
            return {"detail": None}

        try:
            detail = self.tmdb.get_details(selected.id, selected.media_type)
        except TMDBRequestError as e:
            self.logger.log_error(e)
            self.logger.log_fetch(selected, None)
            return {"detail": None, "errors": [*state.errors, str(e)]}

        self.logger.log_fetch(selected, detail)
        return {"detail": detail}

    def present_node(self, state: GraphState) -> Dict[str, Any]:
        self.presenter.render(state.selected, state.detail)
        return {"selected": state.selected}
