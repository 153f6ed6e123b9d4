"""Models for the EOL taxon page lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

DATA_TYPE_TEXT = "http://purl.org/dc/dcmitype/Text"
DATA_TYPE_STILL_IMAGE = "http://purl.org/dc/dcmitype/StillImage"

VettedLevel = Literal[0, 1, 2]


@dataclass(frozen=True, slots=True)
class PageQuery:
    """Lookup of one taxon page by its EOL page id."""

    id: int
    # Limits on the number of returned media objects per type.
    images: int = 0
    videos: int = 0
    sounds: int = 0
    maps: int = 0
    text: int = 0
    # Include the IUCN Red List status object.
    iucn: bool = False
    # 'overview', 'all', or a pipe-delimited list of EOL subject names.
    subjects: str = ""
    # 'all' or a pipe-delimited list: cc-by, cc-by-nc, cc-by-sa, cc-by-nc-sa, pd, na.
    licenses: str = ""
    details: bool = False
    common_names: bool = False
    synonyms: bool = False
    references: bool = False
    # 1 = trusted only, 2 = trusted and unreviewed, 0 = everything.
    vetted: VettedLevel = 0
    cache_ttl: int = 0


@dataclass(frozen=True, slots=True)
class Media:
    """Text or image extracted from a page's data objects."""

    source: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"source": self.source, "value": self.value}


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _int(data: dict[str, Any], key: str) -> int:
    return int(data.get(key, 0) or 0)


def _float(data: dict[str, Any], key: str) -> float:
    return float(data.get(key, 0) or 0)


def _objects(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    values = data.get(key) or []
    if not isinstance(values, list):
        raise ValueError(f"{key} must be an array")
    for value in values:
        if not isinstance(value, dict):
            raise ValueError(f"{key} entries must be objects")
    return values


@dataclass(frozen=True, slots=True)
class Agent:
    full_name: str = ""
    homepage: str = ""
    role: str = ""


@dataclass(frozen=True, slots=True)
class DataObject:
    """One media or text object attached to a taxon page."""

    identifier: str = ""
    data_type: str = ""
    data_subtype: str = ""
    subject: str = ""
    description: str = ""
    mime_type: str = ""
    media_url: str = ""
    eol_media_url: str = ""
    source: str = ""
    license: str = ""
    rights_holder: str = ""
    language: str = ""
    vetted_status: str = ""
    data_rating: float = 0.0
    created: str = ""
    modified: str = ""
    height: int = 0
    width: int = 0
    agents: tuple[Agent, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DataObject":
        return cls(
            identifier=_str(data, "identifier"),
            data_type=_str(data, "dataType"),
            data_subtype=_str(data, "dataSubtype"),
            subject=_str(data, "subject"),
            description=_str(data, "description"),
            mime_type=_str(data, "mimeType"),
            media_url=_str(data, "mediaURL"),
            eol_media_url=_str(data, "eolMediaURL"),
            source=_str(data, "source"),
            license=_str(data, "license"),
            rights_holder=_str(data, "rightsHolder"),
            language=_str(data, "language"),
            vetted_status=_str(data, "vettedStatus"),
            data_rating=_float(data, "dataRating"),
            created=_str(data, "created"),
            modified=_str(data, "modified"),
            height=_int(data, "height"),
            width=_int(data, "width"),
            agents=tuple(
                Agent(
                    full_name=_str(agent, "full_name"),
                    homepage=_str(agent, "homepage"),
                    role=_str(agent, "role"),
                )
                for agent in _objects(data, "agents")
            ),
        )


@dataclass(frozen=True, slots=True)
class Synonym:
    synonym: str = ""
    relationship: str = ""
    resource: str = ""


@dataclass(frozen=True, slots=True)
class TaxonConcept:
    identifier: int = 0
    scientific_name: str = ""
    canonical_form: str = ""
    name_according_to: str = ""
    source_identifier: str = ""
    taxon_rank: str = ""


@dataclass(frozen=True, slots=True)
class VernacularName:
    vernacular_name: str = ""
    language: str = ""
    eol_preferred: bool = False


@dataclass(frozen=True, slots=True)
class PageDetail:
    """Decoded taxon page."""

    identifier: int = 0
    scientific_name: str = ""
    richness_score: float = 0.0
    data_objects: tuple[DataObject, ...] = field(default_factory=tuple)
    references: tuple[str, ...] = field(default_factory=tuple)
    synonyms: tuple[Synonym, ...] = field(default_factory=tuple)
    taxon_concepts: tuple[TaxonConcept, ...] = field(default_factory=tuple)
    vernacular_names: tuple[VernacularName, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageDetail":
        if not isinstance(data, dict):
            raise ValueError("page must be an object")

        references = data.get("references") or []
        if not isinstance(references, list):
            raise ValueError("references must be an array")

        return cls(
            identifier=_int(data, "identifier"),
            scientific_name=_str(data, "scientificName"),
            richness_score=_float(data, "richness_score"),
            data_objects=tuple(DataObject.from_dict(o) for o in _objects(data, "dataObjects")),
            references=tuple(str(r) for r in references),
            synonyms=tuple(
                Synonym(
                    synonym=_str(s, "synonym"),
                    relationship=_str(s, "relationship"),
                    resource=_str(s, "resource"),
                )
                for s in _objects(data, "synonyms")
            ),
            taxon_concepts=tuple(
                TaxonConcept(
                    identifier=_int(c, "identifier"),
                    scientific_name=_str(c, "scientificName"),
                    canonical_form=_str(c, "canonicalForm"),
                    name_according_to=_str(c, "nameAccordingTo"),
                    source_identifier=_str(c, "sourceIdentfier") or _str(c, "sourceIdentifier"),
                    taxon_rank=_str(c, "taxonRank"),
                )
                for c in _objects(data, "taxonConcepts")
            ),
            vernacular_names=tuple(
                VernacularName(
                    vernacular_name=_str(v, "vernacularName"),
                    language=_str(v, "language"),
                    eol_preferred=bool(v.get("eol_preferred", False)),
                )
                for v in _objects(data, "vernacularNames")
            ),
        )

    def texts(self) -> list[Media]:
        """Descriptions of every text data object that has one."""
        return [
            Media(source=o.source, value=o.description)
            for o in self.data_objects
            if o.data_type == DATA_TYPE_TEXT and o.description
        ]

    def images(self) -> list[Media]:
        """EOL-hosted URLs of every still image data object."""
        return [
            Media(source=o.source, value=o.eol_media_url)
            for o in self.data_objects
            if o.data_type == DATA_TYPE_STILL_IMAGE and o.eol_media_url
        ]
