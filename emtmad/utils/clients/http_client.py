from __future__ import annotations

import ssl
import time
from typing import Any, Callable, Mapping

import httpx
import orjson

from emtmad.config import Settings, settings as default_settings
from emtmad.exceptions import DecodeError, TransportError
from emtmad.utils import logger, silence_libs

# ───────────────────────── constants & helpers ────────────────────────── #

_DEFAULT_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Encoding": "gzip, deflate",
}
_FRIENDLY_PT = {
    400: "Requisição inválida.",
    401: "Não autorizado.",
    403: "Operação não permitida.",
    404: "Recurso não encontrado.",
    500: "Erro interno do servidor.",
    502: "Gateway inválido.",
    503: "Serviço temporariamente indisponível.",
    504: "Tempo de resposta do gateway esgotado.",
}

silence_libs("httpx", "httpcore")


def _identity(text: str) -> str:
    return text


# ---------------------main class definition---------------------#
class HttpClient:
    """Asynchronous HTTP transport shared by the service facades.

    One call in, one call out: no retries, no caching. Successful bodies are
    decoded as JSON; anything else raises `TransportError` or `DecodeError`
    with the httpx/orjson exception chained as the cause.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        **kwargs,
    ) -> None:
        cfg = settings or default_settings
        self._timeout = kwargs.get("timeout", cfg.HTTP_TIMEOUT)
        verify = kwargs.get("verify", cfg.ssl_verify)

        # self-signed handling
        if verify is False:
            logger.debug("Verificação HTTPS desabilitada (VERIFY_SSL=false)")
        elif isinstance(verify, ssl.SSLContext):
            logger.debug("Verificação HTTPS usando CA bundle: {}", cfg.CA_BUNDLE)

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=self._timeout,
                read=self._timeout,
                write=self._timeout,
                pool=self._timeout * 2,
            ),
            limits=httpx.Limits(
                max_connections=100,
                max_keepalive_connections=20,
            ),
            headers=_DEFAULT_HEADERS,
            verify=verify,
            follow_redirects=True,
            transport=kwargs.get("transport"),
        )

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *_exc) -> None:
        await self.close()

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    async def close(self) -> None:
        """Close the underlying httpx client."""
        if not self._client.is_closed:
            await self._client.aclose()

    # ──────────────────────── private internals ─────────────────────── #

    @staticmethod
    def _request_kwargs(
        method: str, payload: Mapping[str, Any] | None
    ) -> dict[str, Any]:
        """Form-encode *payload*: query string for GET, body fields otherwise."""
        if payload is None:
            return {}
        fields = {k: "" if v is None else str(v) for k, v in payload.items()}
        if method.upper() == "GET":
            return {"params": fields}
        return {"data": fields}

    def _extract_response_content(
        self, response: httpx.Response, tag: str, url: str
    ) -> Any:
        content = response.content
        try:
            return orjson.loads(content)
        except orjson.JSONDecodeError as exc:
            text = content.decode("utf-8", errors="replace")
            logger.error(
                "[{}] A resposta não era um JSON válido ({} bytes)", tag, len(content)
            )
            raise DecodeError(
                f"Resposta inválida de {url}: {exc}", url=url, body=text
            ) from exc

    def _handle_response_error(
        self, response: httpx.Response, tag: str, url: str
    ) -> None:
        status_code = response.status_code
        friendly = _FRIENDLY_PT.get(status_code, response.reason_phrase or "Erro HTTP")
        final_message = f"{friendly} (HTTP {status_code})"
        logger.error("[{}] Erro na API: {}", tag, final_message)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"{final_message} em {url}", url=url, status_code=status_code
            ) from exc

    # ------- high-level request ------------------------------------------ #

    async def request(
        self,
        method: str,
        url: str,
        payload: Mapping[str, Any] | None = None,
        *,
        tag: str = "-",
        redact: Callable[[str], str] = _identity,
    ) -> Any:
        """
        Perform exactly one HTTP call and return the decoded JSON body.

        Args:
            method: HTTP verb.
            url: Fully qualified target.
            payload: Form fields; sent as query string for GET, body otherwise.
            tag: Short identifier used in log lines.
            redact: Applied to the URL before it reaches logs or exceptions.

        Raises:
            TransportError: network failure, timeout or non-2xx status.
            DecodeError: the body is not valid JSON.
        """
        safe_url = redact(url)
        t0 = time.perf_counter()
        try:
            response = await self._client.request(
                method, url, **self._request_kwargs(method, payload)
            )
        except httpx.TimeoutException as exc:
            logger.error("[{}] Tempo esgotado: {}", tag, type(exc).__name__)
            raise TransportError(
                f"Tempo esgotado ao chamar {safe_url}", url=safe_url
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("[{}] Falha de comunicação: {}", tag, type(exc).__name__)
            raise TransportError(
                f"Falha de comunicação com {safe_url}: {type(exc).__name__}",
                url=safe_url,
            ) from exc

        logger.debug(
            "[{}] {} {} -> {} em {:,.1f} ms",
            tag,
            method.upper(),
            safe_url,
            response.status_code,
            (time.perf_counter() - t0) * 1000,
        )

        if not response.is_success:
            self._handle_response_error(response, tag, safe_url)

        return self._extract_response_content(response, tag, safe_url)
