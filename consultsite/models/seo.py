from typing import List, Optional

from pydantic import BaseModel


class OpenGraph(BaseModel):
    title: str
    description: str
    type: str = "website"
    image: Optional[str] = None


class TwitterCard(BaseModel):
    card: str = "summary_large_image"
    title: str
    description: str
    image: Optional[str] = None


class SEO(BaseModel):
    """Metadata a page renderer turns into <title>/<meta> tags."""

    title: str
    description: str
    keywords: List[str] = []
    open_graph: Optional[OpenGraph] = None
    twitter: Optional[TwitterCard] = None
