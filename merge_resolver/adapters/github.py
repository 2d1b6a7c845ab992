"""GitHub API adapter."""

from typing import Any, Dict, List
from urllib.parse import quote

import requests

from merge_resolver.adapters.base import GitPlatformAdapter, GitPlatformError
from merge_resolver.models import PR, Branch, FileContent


def _pr_from_api(data: Dict[str, Any]) -> PR:
    head = data.get("head") or {}
    base = data.get("base") or {}
    return PR(
        number=data["number"],
        title=data.get("title") or "",
        body=data.get("body") or "",
        head_branch=head.get("ref", ""),
        base_branch=base.get("ref", ""),
        state=data.get("state", "open"),
        html_url=data.get("html_url"),
    )


def _branch_from_api(data: Dict[str, Any]) -> Branch:
    commit = data.get("commit") or {}
    return Branch(
        name=data["name"],
        sha=commit.get("sha", ""),
        protected=bool(data.get("protected")),
    )


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=30)
        except requests.RequestException as e:
            raise GitPlatformError(f"{method} {path} failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except (ValueError, AttributeError):
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}", status_code=resp.status_code)
        return resp

    def get_branch(self, repo: str, branch: str) -> Branch | None:
        try:
            resp = self._request("GET", f"/repos/{repo}/branches/{quote(branch, safe='')}")
        except GitPlatformError as e:
            if e.status_code == 404:
                return None
            raise
        data = resp.json()
        if not isinstance(data, dict):
            raise GitPlatformError(f"Unexpected branch response for {branch!r}", status_code=resp.status_code)
        return _branch_from_api(data)

    def get_file_content(
        self,
        repo: str,
        path: str,
        ref: str | None = None,
    ) -> FileContent | List[FileContent] | None:
        params = {"ref": ref} if ref else None
        try:
            resp = self._request("GET", f"/repos/{repo}/contents/{quote(path.lstrip('/'))}", params=params)
        except GitPlatformError as e:
            if e.status_code == 404:
                return None
            raise
        data = resp.json()
        if isinstance(data, list):
            return [FileContent.model_validate(d) for d in data]
        return FileContent.model_validate(data)

    def create_pr(
        self,
        repo: str,
        title: str,
        body: str,
        head: str,
        base: str,
    ) -> PR:
        resp = self._request(
            "POST",
            f"/repos/{repo}/pulls",
            json={"title": title, "body": body, "head": head, "base": base},
        )
        return _pr_from_api(resp.json())
