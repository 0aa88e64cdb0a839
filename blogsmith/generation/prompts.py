"""Prompts for article enhancement."""

from typing import List

from pydantic import BaseModel, Field

from ..models import Article

SYSTEM_PROMPT = """You are an expert content editor. Your task is to enhance and improve the given article by:
1. Improving clarity and readability
2. Adding depth and insights from the reference articles provided
3. Maintaining the original tone and style
4. Adding proper citations at the bottom of the article

IMPORTANT: At the end of the enhanced article, add a "References" section with properly formatted citations for each reference article used."""

NO_REFERENCES = "No reference articles available."


class ReferenceExcerpt(BaseModel):
    """Reference material handed to the model."""

    url: str = Field(..., description="Reference URL")
    title: str = Field("Reference Article", description="Reference title")
    content: str = Field("", description="Reference text, untruncated")


def format_reference(index: int, reference: ReferenceExcerpt, max_chars: int) -> str:
    return (
        f"--- Reference {index} ---\n"
        f"URL: {reference.url}\n"
        f"Title: {reference.title}\n"
        f"Content: {reference.content[:max_chars]}\n"
    )


def build_user_prompt(
    article: Article,
    references: List[ReferenceExcerpt],
    max_reference_chars: int = 2000,
) -> str:
    """Embed the original article and truncated reference excerpts."""
    if references:
        blocks = "\n".join(
            format_reference(i, ref, max_reference_chars)
            for i, ref in enumerate(references, start=1)
        )
        reference_section = f"REFERENCE ARTICLES FOR CONTEXT:\n{blocks}"
    else:
        reference_section = NO_REFERENCES

    return f"""Please enhance the following article:

ORIGINAL ARTICLE:
Title: {article.title}
Content:
{article.original_content}

{reference_section}

Please provide the enhanced version of the article with a References section at the bottom."""
