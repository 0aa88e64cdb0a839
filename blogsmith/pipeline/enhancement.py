"""Reference-augmented rewriting of a single article."""

from typing import List, Optional

from rich.console import Console

from ..config import EnhancementConfig
from ..db import ArticleStore
from ..errors import BlogsmithError, MissingFieldError, ProviderFailure, TransportError
from ..extraction import FirecrawlClient
from ..generation import SYSTEM_PROMPT, LLMProvider, ReferenceExcerpt, build_user_prompt
from ..models import Article, ArticleStatus, EnhanceResult

console = Console()


class EnhancementPipeline:
    """
    Drive one article to ``enhanced`` or ``error``.

    The article is marked ``processing`` before any external call. Reference
    search is best effort; any failure of the rewrite step (or anything
    unexpected) is written to the article as ``error`` and returned as a
    failed result. Nothing is retried.
    """

    def __init__(
        self,
        store: ArticleStore,
        searcher: FirecrawlClient,
        llm_provider: LLMProvider,
        config: Optional[EnhancementConfig] = None,
    ) -> None:
        self.store = store
        self.searcher = searcher
        self.llm_provider = llm_provider
        self.config = config or EnhancementConfig()

    def find_references(self, article: Article) -> List[ReferenceExcerpt]:
        """Search for related pages, excluding the article's own URL."""
        if self.config.search_limit == 0:
            return []
        try:
            results = self.searcher.search(article.title, limit=self.config.search_limit)
        except (TransportError, ProviderFailure) as e:
            console.print(
                f"[yellow]enhance {article.id} step=search: continuing without references: {e}[/yellow]"
            )
            return []

        references = []
        for result in results:
            if not result.url or result.url == article.source_url:
                continue
            references.append(
                ReferenceExcerpt(
                    url=result.url,
                    title=result.title or "Reference Article",
                    content=result.excerpt,
                )
            )
        console.print(f"[dim]enhance {article.id} step=search: {len(references)} references[/dim]")
        return references

    def _fail(self, article_id: str, step: str, error: Exception) -> EnhanceResult:
        """Record the failure on the article (best effort) and build the result."""
        if isinstance(error, BlogsmithError):
            message, reason = str(error), error.code
        else:
            message, reason = str(error) or type(error).__name__, "unexpected_error"

        console.print(f"[red]enhance {article_id} step={step}: {message}[/red]")
        try:
            self.store.update(
                article_id,
                {"status": ArticleStatus.ERROR, "error_message": message},
            )
        except Exception as e:
            console.print(
                f"[red]enhance {article_id} step=commit-error: could not record failure, "
                f"article may remain processing: {e}[/red]"
            )
        return EnhanceResult(success=False, message=message, reason=reason)

    def enhance(self, article_id: Optional[str]) -> EnhanceResult:
        """
        Enhance one article.

        Raises:
            MissingFieldError: ``article_id`` is blank
            ArticleNotFoundError: no such article (nothing is written)
        """
        if not article_id or not article_id.strip():
            raise MissingFieldError("articleId")

        article = self.store.get(article_id)
        console.print(f"[bold]enhance {article_id}: {article.title}[/bold]")

        step = "mark-processing"
        try:
            self.store.update(
                article_id,
                {"status": ArticleStatus.PROCESSING, "error_message": None},
            )

            step = "search"
            references = self.find_references(article)

            step = "rewrite"
            user_prompt = build_user_prompt(
                article, references, max_reference_chars=self.config.max_reference_chars
            )
            enhanced_content = self.llm_provider.rewrite(SYSTEM_PROMPT, user_prompt)

            step = "commit"
            updated = self.store.update(
                article_id,
                {
                    "enhanced_content": enhanced_content,
                    "reference_urls": [ref.url for ref in references],
                    "status": ArticleStatus.ENHANCED,
                    "error_message": None,
                },
            )
        except Exception as e:
            return self._fail(article_id, step, e)

        console.print(f"[green]enhance {article_id}: enhanced with {len(references)} references[/green]")
        return EnhanceResult(
            success=True,
            message="Article enhanced successfully",
            article=updated,
        )
