"""Showcase API client.

A thin wrapper around the Showcase HTTP API built on ``requests``.  It
performs the same calls as the interactive API demo page:

* :meth:`ShowcaseAPI.hello` – the greeting route.
* :meth:`ShowcaseAPI.get_time` – fetch the current time snapshot.
* :meth:`ShowcaseAPI.calculate` – run one arithmetic operation.
* :meth:`ShowcaseAPI.list_users` – list users, optionally by role.
* :meth:`ShowcaseAPI.create_user` – add a user to the directory.

Every method returns a ``(data, error)`` tuple instead of raising, so
callers can show the server's error message directly.  The module is
also a small command line tool::

    python showcase_client.py --base-url http://localhost:8000 calc 10 divide 4
    python showcase_client.py users --role developer
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ShowcaseAPI:
    """Client for the Showcase API.

    Paths are relative to ``base_url`` plus ``prefix`` (``/api`` unless
    the server was configured with a different ``API_PREFIX``).
    """

    def __init__(
        self,
        base_url: str,
        *,
        prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 10,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Server root, e.g. ``http://localhost:8000``.
            prefix: API prefix the routes are mounted under.
            session: Optional requests session.  One is created when
                omitted.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            ``(data, None)`` with the decoded JSON body on success, or
            ``(None, error)`` where ``error`` has the keys
            ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    body = exc.response.json()
                    message = body.get("error") or body.get("detail") or str(body)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def hello(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/hello")

    def get_time(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch the server's current time snapshot."""
        return self._request("GET", "/time")

    def calculate(self, a: Any, b: Any, operation: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Ask the server to evaluate ``a <operation> b``.

        Operands are sent as given; the server rejects anything that is
        not a JSON number.
        """
        return self._request("POST", "/calculate", json_body={"a": a, "b": b, "operation": operation})

    def list_users(self, role: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return the user list, filtered by ``role`` when given."""
        params = {"role": role} if role else None
        data, error = self._request("GET", "/users", params=params)
        if error:
            return [], error
        return (data or {}).get("users", []), None

    def create_user(self, name: str, email: str, role: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user and return the stored record (with its id)."""
        data, error = self._request("POST", "/users", json_body={"name": name, "email": email, "role": role})
        if error:
            return None, error
        return (data or {}).get("user"), None


# ----------------------------------------------------------------------
# Command line interface
# ----------------------------------------------------------------------
def _number(text: str) -> Any:
    try:
        return int(text)
    except ValueError:
        return float(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Call the Showcase API.")
    parser.add_argument("--base-url", default="http://localhost:8000", help="Server root URL")
    parser.add_argument("--prefix", default="/api", help="API prefix (default: /api)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("hello", help="Call the greeting route")
    sub.add_parser("time", help="Show the server time")

    calc = sub.add_parser("calc", help="Evaluate A OP B")
    calc.add_argument("a", type=_number)
    calc.add_argument("operation", choices=["add", "subtract", "multiply", "divide"])
    calc.add_argument("b", type=_number)

    users = sub.add_parser("users", help="List users")
    users.add_argument("--role", help="Only show users with this role")

    add = sub.add_parser("add-user", help="Create a user")
    add.add_argument("name")
    add.add_argument("email")
    add.add_argument("role")
    return parser


def main(argv: Optional[Sequence[str]] = None, client: Optional[ShowcaseAPI] = None) -> int:
    """Run one CLI command and return the process exit code."""
    args = build_parser().parse_args(argv)
    client = client or ShowcaseAPI(args.base_url, prefix=args.prefix)

    if args.command == "hello":
        data, error = client.hello()
    elif args.command == "time":
        data, error = client.get_time()
    elif args.command == "calc":
        data, error = client.calculate(args.a, args.b, args.operation)
    elif args.command == "users":
        data, error = client.list_users(args.role)
    else:
        data, error = client.create_user(args.name, args.email, args.role)

    if error:
        print(f"Error: {error['message']}", file=sys.stderr)
        return 1
    print(json.dumps(data, indent=2))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
