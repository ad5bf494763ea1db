"""
Resource base - CRUD and search over one API collection.

Every operation is a single request/response exchange: validate the CID
(where one is addressed), encode the value (writes), call the HTTP client,
decode the body into the resource model. Errors propagate unchanged.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from ..cid import validate_cid
from ..errors import InvalidConfigError, TransportError
from ..http_client import APIHttpClient
from ..schemas.base import APIModel
from ..search import SearchFilter, build_search_query

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=APIModel)


class Resource(Generic[M]):
    """Base class for API collections such as /dashboard."""

    base_path: str = ""
    label: str = ""
    model: Type[M]

    def __init__(self, http: APIHttpClient):
        self._http = http

    def _get_one(self, path: str) -> M:
        body = self._http.get(path)
        logger.debug("%s response: %s", path, body.decode("utf-8", errors="replace"))
        return self.model.from_json(body)

    def fetch(self, cid: Optional[str]) -> M:
        """
        Retrieve a single resource by CID.

        Raises:
            InvalidCIDError: CID absent or malformed (no request is made)
            TransportError: The GET failed
            DeserializationError: The body is not a valid resource
        """
        cid = validate_cid(cid, self.base_path, self.label)
        return self._get_one(cid)

    def fetch_all(self) -> List[M]:
        """Retrieve every resource in the collection (single response, no paging)."""
        body = self._http.get(self.base_path)
        return self.model.list_from_json(body)

    def create(self, config: Optional[M]) -> M:
        """
        Create a resource; the CID is assigned by the server and returned.

        Any CID already set on the value is not sent.
        """
        if config is None:
            raise InvalidConfigError(f"Invalid {self.label} config [nil]")

        payload = config.to_payload(exclude_cid=True)
        body = self._http.post(self.base_path, payload)
        created = self.model.from_json(body)
        logger.info("created %s %s", self.label, created.cid)
        return created

    def update(self, config: Optional[M]) -> M:
        """
        Replace a resource with the given value (whole-object PUT to its CID).

        Raises:
            InvalidConfigError: config is None
            InvalidCIDError: config.cid absent or malformed (no request is made)
        """
        if config is None:
            raise InvalidConfigError(f"Invalid {self.label} config [nil]")

        cid = validate_cid(config.cid, self.base_path, self.label)
        payload = config.to_payload()
        body = self._http.put(cid, payload)
        logger.info("updated %s %s", self.label, cid)
        return self.model.from_json(body)

    def delete(self, config: Optional[M]) -> bool:
        """Delete the resource identified by config.cid."""
        if config is None:
            raise InvalidConfigError(f"Invalid {self.label} config [none]")
        return self.delete_by_cid(config.cid)

    def delete_by_cid(self, cid: Optional[str]) -> bool:
        """
        Delete a resource by CID.

        Returns:
            True once the DELETE call succeeded; the response body is ignored

        Raises:
            InvalidCIDError: CID absent or malformed (no request is made)
            TransportError: The DELETE failed
        """
        cid = validate_cid(cid, self.base_path, self.label)
        self._http.delete(cid)
        logger.info("deleted %s %s", self.label, cid)
        return True

    def search(self, query: Optional[str] = None, filters: Optional[SearchFilter] = None) -> List[M]:
        """
        Search the collection.

        Args:
            query: Free-text search term (sent as search=<query>)
            filters: Filter field -> allowed values, e.g. {"f_tags_has": ["dc:sfo1"]}

        Returns:
            Matching resources; with neither query nor filters, the whole collection
        """
        qs = build_search_query(query, filters)
        if not qs:
            return self.fetch_all()

        path = f"{self.base_path}?{qs}"
        try:
            body = self._http.get(path)
        except TransportError as e:
            raise TransportError(f"[ERROR] API call error {e}", status=e.status, body=e.body) from e
        return self.model.list_from_json(body)

