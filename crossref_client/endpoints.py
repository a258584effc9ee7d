"""The CrossRef endpoint table.

Each public function is described by a URL template and the kind of fetcher
that serves it. Templates contain at most one ``{param}`` placeholder.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

PLACEHOLDER = "{param}"


class Kind(Enum):
    """How an endpoint's response is interpreted."""

    ITEM = "item"
    LIST = "list"


@dataclass(frozen=True)
class Endpoint:
    """A CrossRef endpoint: where it lives and what it returns."""

    url_template: str
    kind: Kind

    @property
    def parameterized(self) -> bool:
        """True if the template takes a path parameter."""
        return PLACEHOLDER in self.url_template

    def resolve(self, param: str = "") -> str:
        """Substitute *param* for the first placeholder in the template."""
        return self.url_template.replace(PLACEHOLDER, str(param), 1)


ENDPOINTS: Mapping[str, Endpoint] = MappingProxyType(
    {
        # /works/{doi}           metadata for a CrossRef DOI
        # /funders/{funder_id}   a funder and its sub-organizations
        # /prefixes/{prefix}     the owner of a DOI prefix
        # /members/{member_id}   a CrossRef member
        # /types/{type_id}       a work type
        # /journals/{issn}       a journal
        "work": Endpoint("works/{param}", Kind.ITEM),
        "funder": Endpoint("funders/{param}", Kind.ITEM),
        "prefix": Endpoint("prefixes/{param}", Kind.ITEM),
        "member": Endpoint("members/{param}", Kind.ITEM),
        "type": Endpoint("types/{param}", Kind.ITEM),
        "journal": Endpoint("journals/{param}", Kind.ITEM),
        # works associated with a single funder, prefix, member, journal or type
        "funder_works": Endpoint("funders/{param}/works", Kind.LIST),
        "prefix_works": Endpoint("prefixes/{param}/works", Kind.LIST),
        "member_works": Endpoint("members/{param}/works", Kind.LIST),
        "journal_works": Endpoint("journals/{param}/works", Kind.LIST),
        "type_works": Endpoint("types/{param}/works", Kind.LIST),
        # collection roots; /works pages 20 at a time by default
        "works": Endpoint("works", Kind.LIST),
        "funders": Endpoint("funders", Kind.LIST),
        "members": Endpoint("members", Kind.LIST),
        "types": Endpoint("types", Kind.LIST),
        "licenses": Endpoint("licenses", Kind.LIST),
        "journals": Endpoint("journals", Kind.LIST),
    }
)
