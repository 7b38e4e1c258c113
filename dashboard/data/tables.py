"""Table-style access to the MindfulSpace table service.

Queries read like the hosted client they stand in for::

    client.table("goals").select("*").eq("user_id", uid).order("created_at").limit(5).execute()

``execute`` never raises for remote failures; it returns a ``QueryResult``
whose ``error`` is set instead, so callers decide how to surface it.
"""

import logging
from dataclasses import dataclass
from typing import Any

import requests

from dashboard.data import api_client

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    data: Any = None
    error: str | None = None

    @property
    def ok(self):
        return self.error is None


class TableQuery:
    def __init__(self, client, table):
        self._client = client
        self._table = table
        self._method = "GET"
        self._columns = None
        self._filters = {}
        self._order = None
        self._ascending = False
        self._limit = None
        self._single = False
        self._values = None

    def select(self, columns="*"):
        self._method = "GET"
        if isinstance(columns, (list, tuple)):
            columns = ",".join(columns)
        self._columns = None if columns in (None, "*") else str(columns).replace(" ", "")
        return self

    def insert(self, values):
        self._method = "POST"
        self._values = dict(values)
        return self

    def update(self, values):
        self._method = "PATCH"
        self._values = dict(values)
        return self

    def delete(self):
        self._method = "DELETE"
        return self

    def eq(self, column, value):
        self._filters[column] = value
        return self

    def order(self, column, ascending=False):
        self._order = column
        self._ascending = bool(ascending)
        return self

    def limit(self, count):
        self._limit = int(count)
        return self

    def single(self):
        self._single = True
        return self

    def _params(self):
        params = {}
        for column, value in self._filters.items():
            params[column] = str(value).lower() if isinstance(value, bool) else value
        if self._method != "GET":
            return params
        if self._columns:
            params["columns"] = self._columns
        if self._order:
            params["order"] = self._order
            params["ascending"] = "true" if self._ascending else "false"
        if self._limit is not None:
            params["limit"] = self._limit
        if self._single:
            params["single"] = "true"
        return params

    def execute(self):
        path = f"/v1/tables/{self._table}"
        body = {"values": self._values} if self._method in {"POST", "PATCH"} else None
        try:
            payload = self._client.transport(self._method, path, params=self._params() or None, json=body)
        except (RuntimeError, requests.RequestException) as exc:
            logger.warning("%s %s failed: %s", self._method, path, exc)
            return QueryResult(error=str(exc))
        return QueryResult(data=(payload or {}).get("data"))


class TableClient:
    def __init__(self, transport=None):
        self.transport = transport or api_client.request

    def table(self, name):
        return TableQuery(self, name)
