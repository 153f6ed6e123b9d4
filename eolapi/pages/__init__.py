"""Lookup of single EOL taxon pages."""

from eolapi.pages.lookup import fetch_page_detail, page_url
from eolapi.pages.models import DataObject, Media, PageDetail, PageQuery

__all__ = ["DataObject", "Media", "PageDetail", "PageQuery", "fetch_page_detail", "page_url"]
