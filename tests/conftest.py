"""
Shared test fixtures: fake HTTP sessions and a client wired to them.
"""

import json
import re
from datetime import datetime, timezone
from urllib.parse import urlsplit, unquote

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from core.api_client import Client

BASE_URL = "https://gitlab.example.com"
API_ROOT = BASE_URL + "/api/v4/"


def build_response(request, status_code, body=None, headers=None):
    """Build a real requests.Response for a prepared request."""
    response = requests.Response()
    response.status_code = status_code
    response.headers = CaseInsensitiveDict(headers or {})
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode() if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode()
        response.headers.setdefault("Content-Type", "application/json")
    response.encoding = "utf-8"
    response.request = request
    response.url = request.url
    return response


class ScriptedSession(requests.Session):
    """Session that answers requests from a queue of canned replies.

    Each reply is ``(status, body, headers)`` or an exception to raise.
    """

    def __init__(self, replies):
        super().__init__()
        self.replies = list(replies)
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append(request)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        status, body, headers = (tuple(reply) + (None, None))[:3]
        return build_response(request, status, body, headers)


_CHECKS_PATH = re.compile(r"^projects/(?P<project>[^/]+)/external_status_checks(?:/(?P<id>\d+))?$")
_MR_PATH = re.compile(
    r"^projects/(?P<project>[^/]+)/merge_requests/(?P<iid>\d+)/(?P<action>status_checks|status_check_responses)$"
)


class FakeGitLabSession(requests.Session):
    """In-memory stand-in for the external status checks endpoints."""

    def __init__(self, protected_branches=None):
        super().__init__()
        self.protected_branches = protected_branches or {1: "main", 2: "release"}
        self.checks = {}
        self.statuses = {}
        self.sent = []
        self._next_id = 1

    def send(self, request, **kwargs):
        self.sent.append(request)
        path = urlsplit(request.url).path
        assert path.startswith("/api/v4/")
        path = path[len("/api/v4/"):]
        body = json.loads(request.body) if request.body else {}

        match = _CHECKS_PATH.match(path)
        if match:
            project = unquote(match.group("project"))
            check_id = match.group("id")
            return self._checks(request, project, int(check_id) if check_id else None, body)

        match = _MR_PATH.match(path)
        if match:
            project = unquote(match.group("project"))
            if match.group("action") == "status_checks":
                return self._merge_checks(request, project, int(match.group("iid")))
            return self._set_status(request, project, int(match.group("iid")), body)

        return build_response(request, 404, {"message": "404 Not Found"})

    def _branches(self, project_id, ids):
        now = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc).isoformat()
        return [
            {
                "id": branch_id,
                "project_id": project_id,
                "name": self.protected_branches[branch_id],
                "created_at": now,
                "updated_at": now,
                "code_owner_approval_required": False,
            }
            for branch_id in ids
        ]

    def _checks(self, request, project, check_id, body):
        if check_id is None:
            if request.method == "GET":
                items = [c for c in self.checks.values() if c["_project"] == project]
                return build_response(request, 200, [self._public(c) for c in items])
            if request.method == "POST":
                if "name" not in body or "external_url" not in body:
                    return build_response(request, 400, {"error": "name, external_url are missing"})
                check = {
                    "_project": project,
                    "id": self._next_id,
                    "name": body["name"],
                    "project_id": 42,
                    "external_url": body["external_url"],
                    "_branch_ids": body.get("protected_branch_ids", []),
                }
                self.checks[check["id"]] = check
                self._next_id += 1
                return build_response(request, 201, self._public(check))
            return build_response(request, 405, {"message": "405 Method Not Allowed"})

        check = self.checks.get(check_id)
        if check is None or check["_project"] != project:
            return build_response(request, 404, {"message": "404 Not found"})
        if request.method == "DELETE":
            del self.checks[check_id]
            return build_response(request, 204)
        if request.method == "PUT":
            for key in ("name", "external_url"):
                if key in body:
                    check[key] = body[key]
            if "protected_branch_ids" in body:
                check["_branch_ids"] = body["protected_branch_ids"]
            return build_response(request, 200, self._public(check))
        return build_response(request, 405, {"message": "405 Method Not Allowed"})

    def _public(self, check):
        data = {key: value for key, value in check.items() if not key.startswith("_")}
        data["protected_branches"] = self._branches(check["project_id"], check["_branch_ids"])
        return data

    def _merge_checks(self, request, project, iid):
        items = []
        for check in self.checks.values():
            if check["_project"] != project:
                continue
            items.append({
                "id": check["id"],
                "name": check["name"],
                "external_url": check["external_url"],
                "status": self.statuses.get((project, iid, check["id"]), {}).get("status", "pending"),
            })
        return build_response(request, 200, items)

    def _set_status(self, request, project, iid, body):
        if "sha" not in body or "external_status_check_id" not in body:
            return build_response(request, 400, {"error": "sha is missing"})
        if body["external_status_check_id"] not in self.checks:
            return build_response(request, 404, {"message": "404 Not found"})
        self.statuses[(project, iid, body["external_status_check_id"])] = {
            "sha": body["sha"],
            "status": body.get("status", "passed"),
        }
        return build_response(request, 201, {"id": 1, "status": body.get("status", "passed")})


@pytest.fixture
def scripted():
    """Return a factory building a client backed by canned replies."""
    def factory(*replies, **client_kwargs):
        session = ScriptedSession(replies)
        client_kwargs.setdefault("max_retries", 0)
        client = Client(
            "secret-token",
            base_url=BASE_URL,
            session=session,
            requests_per_second=0,
            **client_kwargs,
        )
        return client, session
    return factory


@pytest.fixture
def fake_gitlab():
    return FakeGitLabSession()


@pytest.fixture
def client(fake_gitlab):
    """Client talking to the in-memory fake GitLab."""
    return Client(
        "secret-token",
        base_url=BASE_URL,
        session=fake_gitlab,
        requests_per_second=0,
        max_retries=0,
    )
