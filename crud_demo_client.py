"""CRUD demo API client.

This module wraps the four routes of the demo server in a small client
class built on the ``requests`` library:

* :meth:`DemoAPIClient.greet` – ``GET /greet`` with query parameters.
* :meth:`DemoAPIClient.average` – ``POST /math/average`` with a JSON body.
* :meth:`DemoAPIClient.shout` – ``PUT /shout/<word>`` with a path segment.
* :meth:`DemoAPIClient.delete_resource` – ``DELETE /secure/resource``
  with an ``x-role`` header.

Every call logs the ``result`` of a successful response, or the error
payload the server sent back.  Transport and decoding failures are
logged as well and never raised, so a failing call cannot break the
caller's flow.  The parsed body is returned (``None`` when nothing
could be parsed) for callers that want to inspect it.

Three helpers run all four calls:

* :func:`call_all_sequential` – one after another, then logs
  ``finish all CRUD``.
* :func:`call_all_concurrent` – schedules every call as an asyncio
  task and logs ``finish all`` without waiting for them.
* :func:`gather_all` – like :func:`call_all_concurrent` but waits for
  all four calls before logging.

Run the module as a script to exercise a running server::

    python crud_demo_client.py --name yossi --lang he --numbers 12345
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import threading
from typing import Any, Dict, List, Optional, Sequence, Union
from urllib.parse import quote

import requests

from crud_demo_api.app.core.config import settings
from crud_demo_api.app.core.logging_config import setup_logging, teardown_logging


logger = logging.getLogger(__name__)

NumbersInput = Union[str, Sequence[Any]]


def split_digits(numbers: NumbersInput) -> List[Any]:
    """Turn ``"12345"`` into ``["1", "2", "3", "4", "5"]``.

    Other sequences are copied into a list.  The server does the
    numeric validation, so no element is checked here.
    """
    return list(numbers)


class DemoAPIClient:
    """Client for the CRUD demo API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server.  Defaults to
                ``settings.client_base_url``.
            timeout: Per-request timeout in seconds.  Defaults to
                ``settings.client_timeout``.
            session: Optional requests session.  Anything with a
                compatible ``request`` method works, which lets tests
                pass FastAPI's ``TestClient``.  The concurrent helpers
                call it from several threads at once, so an injected
                session must be thread-safe.  Without one, each thread
                gets its own ``requests.Session``.
        """
        self.base_url = (base_url or settings.client_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.client_timeout
        self._session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        headers: Dict[str, str] | None = None,
    ) -> Optional[Dict[str, Any]]:
        """Send a request and return the decoded JSON body.

        Error status codes are not raised: the demo server answers them
        with a JSON payload, which is returned like any other body.
        Returns ``None`` when the request fails or the body is not JSON.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            return None
        try:
            data = response.json()
        except ValueError as exc:
            logger.error("%s %s returned a non-JSON body (%s): %s", method, path, response.status_code, exc)
            return None
        if not isinstance(data, dict):
            logger.error("%s %s returned unexpected JSON (%s): %r", method, path, response.status_code, data)
            return None
        if "error" in data:
            logger.warning("%s %s failed (%s): %s", method, path, response.status_code, data)
        return data

    @staticmethod
    def _log_result(label: str, data: Optional[Dict[str, Any]]) -> None:
        if data is not None and "result" in data:
            logger.info("%s: %s", label, data["result"])

    # ------------------------------------------------------------------
    # Route wrappers
    # ------------------------------------------------------------------
    def greet(self, name: str, lang: Optional[str] = "en") -> Optional[Dict[str, Any]]:
        """Call ``GET /greet``; ``lang=None`` leaves the parameter out."""
        params = {"name": name}
        if lang is not None:
            params["lang"] = lang
        data = self._request("GET", "/greet", params=params)
        self._log_result("greet", data)
        return data

    def average(self, numbers: NumbersInput) -> Optional[Dict[str, Any]]:
        """Call ``POST /math/average``.

        ``numbers`` may be a list or a string of digits, which is split
        into single characters first.  Logs the average on success.
        """
        data = self._request("POST", "/math/average", json_body={"numbers": split_digits(numbers)})
        if data is not None and isinstance(data.get("result"), dict):
            logger.info("average: %s", data["result"].get("average"))
        return data

    def shout(self, word: str) -> Optional[Dict[str, Any]]:
        """Call ``PUT /shout/<word>`` with ``word`` percent-encoded."""
        data = self._request("PUT", f"/shout/{quote(word, safe='')}")
        self._log_result("shout", data)
        return data

    def delete_resource(self, role: str) -> Optional[Dict[str, Any]]:
        """Call ``DELETE /secure/resource`` sending ``role`` as ``x-role``."""
        data = self._request("DELETE", "/secure/resource", headers={"x-role": role})
        self._log_result("delete", data)
        return data


# ----------------------------------------------------------------------
# Orchestration helpers
# ----------------------------------------------------------------------
def call_all_sequential(
    client: DemoAPIClient,
    name: str,
    lang: Optional[str],
    numbers: NumbersInput,
    word: str,
    role: str,
) -> None:
    """Run the four calls in order, each after the previous one logged."""
    client.greet(name, lang)
    client.average(numbers)
    client.shout(word)
    client.delete_resource(role)
    logger.info("finish all CRUD")


def _start_all(
    client: DemoAPIClient,
    name: str,
    lang: Optional[str],
    numbers: NumbersInput,
    word: str,
    role: str,
) -> List["asyncio.Task[Optional[Dict[str, Any]]]"]:
    return [
        asyncio.create_task(asyncio.to_thread(client.greet, name, lang)),
        asyncio.create_task(asyncio.to_thread(client.average, numbers)),
        asyncio.create_task(asyncio.to_thread(client.shout, word)),
        asyncio.create_task(asyncio.to_thread(client.delete_resource, role)),
    ]


async def call_all_concurrent(
    client: DemoAPIClient,
    name: str,
    lang: Optional[str],
    numbers: NumbersInput,
    word: str,
    role: str,
) -> List["asyncio.Task[Optional[Dict[str, Any]]]"]:
    """Start the four calls without waiting for them.

    ``finish all`` is logged straight away, usually before any call
    has finished.  The tasks are returned; they are cancelled if the
    event loop closes before they complete.
    """
    tasks = _start_all(client, name, lang, numbers, word, role)
    logger.info("finish all")
    return tasks


async def gather_all(
    client: DemoAPIClient,
    name: str,
    lang: Optional[str],
    numbers: NumbersInput,
    word: str,
    role: str,
) -> List[Optional[Dict[str, Any]]]:
    """Run the four calls concurrently and wait for all of them.

    Returns the bodies in call order: greet, average, shout, delete.
    """
    tasks = _start_all(client, name, lang, numbers, word, role)
    results = await asyncio.gather(*tasks)
    logger.info("finish all")
    return list(results)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Call every route of the CRUD demo API.")
    parser.add_argument("--base-url", default=settings.client_base_url, help="Server base URL")
    parser.add_argument("--name", default="yossi")
    parser.add_argument("--lang", default="he")
    parser.add_argument("--numbers", default="12345", help="Digits to average, e.g. 12345")
    parser.add_argument("--word", default="medina")
    parser.add_argument("--role", default="admin")
    parser.add_argument(
        "--mode",
        choices=["sequential", "concurrent", "gather"],
        default="gather",
        help="How to run the four calls",
    )
    args = parser.parse_args(argv)

    setup_logging()
    client = DemoAPIClient(base_url=args.base_url)
    call_args = (client, args.name, args.lang, args.numbers, args.word, args.role)

    async def run_concurrent() -> None:
        tasks = await call_all_concurrent(*call_args)
        # Keep the loop alive so the detached calls can still log.
        await asyncio.wait(tasks)

    try:
        if args.mode == "sequential":
            call_all_sequential(*call_args)
        elif args.mode == "concurrent":
            asyncio.run(run_concurrent())
        else:
            asyncio.run(gather_all(*call_args))
    finally:
        teardown_logging()


if __name__ == "__main__":
    main()
