import argparse
import asyncio
import inspect
import sys
from dataclasses import asdict
from typing import Any, Sequence

import orjson
from rich.console import Console

from emtmad import __version__
from emtmad.config import settings
from emtmad.exceptions import RequestError, UsageError
from emtmad.factory import create_service_client
from emtmad.models import AssembledRequest, ServiceCategory
from emtmad.services import ServiceFacade
from emtmad.utils import logger

console = Console(soft_wrap=True)
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_REQUEST_ERROR = 1
EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emtmad",
        description="Chama as operações dos serviços EMT Madrid e imprime o JSON de resposta.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--client-id",
        default=settings.EMT_CLIENT_ID,
        help="Identificador do cliente (padrão: EMT_CLIENT_ID)",
    )
    parser.add_argument(
        "--pass-key",
        default=settings.EMT_PASS_KEY,
        help="Chave do cliente (padrão: EMT_PASS_KEY)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Mostra a requisição montada, sem enviá-la",
    )
    parser.add_argument(
        "service",
        choices=[c.value for c in ServiceCategory],
        help="Família de serviço",
    )
    parser.add_argument("operation", help="Operação, ex.: get_groups, list_parking")
    parser.add_argument(
        "params",
        nargs="*",
        metavar="key=value",
        help="Parâmetros da operação; um valor sem '=' vira o argumento posicional",
    )
    return parser


def parse_params(items: Sequence[str]) -> tuple[list[str], dict[str, str]]:
    """Split ``key=value`` pairs from bare positional values."""
    positional: list[str] = []
    named: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if sep and key:
            named[key] = value
        else:
            positional.append(item)
    return positional, named


def resolve_operation(facade: ServiceFacade, name: str):
    op = getattr(type(facade), name, None)
    if name.startswith("_") or op is None or not inspect.iscoroutinefunction(op):
        available = sorted(
            n
            for n, fn in inspect.getmembers(type(facade), inspect.iscoroutinefunction)
            if not n.startswith("_") and n not in ("close",)
        )
        raise UsageError(
            f"Operação '{name}' inexistente em '{facade.category.value}'. "
            f"Disponíveis: {', '.join(available)}"
        )
    return getattr(facade, name)


def bind_arguments(op, positional: list[str], named: dict[str, str]):
    """Map CLI values onto the operation signature.

    Operations taking a single ``params`` mapping receive every ``key=value``
    pair in it. Other single-argument operations accept either a bare value or
    one ``key=value`` pair (``id=7``), whose value is passed positionally. The
    rest receive the pairs as keyword arguments.
    """
    parameters = inspect.signature(op).parameters
    if list(parameters) == ["params"]:
        if positional:
            raise UsageError("Esta operação aceita apenas parâmetros key=value")
        return (named or None,), {}
    if len(parameters) == 1 and not positional and len(named) == 1:
        return (next(iter(named.values())),), {}
    try:
        bound = inspect.signature(op).bind(*positional, **named)
    except TypeError as exc:
        raise UsageError(f"Argumentos inválidos: {exc}") from exc
    return bound.args, bound.kwargs


def _redacted(facade: ServiceFacade, request: AssembledRequest) -> dict[str, Any]:
    data = asdict(request)
    data["target"] = facade.credentials.redact(request.target)
    if request.payload and "passKey" in request.payload:
        data["payload"] = {**request.payload, "passKey": "***"}
    return data


async def run(args: argparse.Namespace) -> Any:
    if not args.client_id or not args.pass_key:
        raise UsageError("Credenciais ausentes: use --client-id/--pass-key ou EMT_CLIENT_ID/EMT_PASS_KEY")

    selector = create_service_client(args.client_id, args.pass_key, dry_run=args.dry_run)
    facade = selector.require(args.service)
    async with facade:
        op = resolve_operation(facade, args.operation)
        positional, named = parse_params(args.params)
        call_args, call_kwargs = bind_arguments(op, positional, named)
        result = await op(*call_args, **call_kwargs)

    if args.dry_run:
        return _redacted(facade, result)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger.configure(extra={"category": args.service})
    try:
        result = asyncio.run(run(args))
    except UsageError as exc:
        err_console.print(f"[bold red]Erro de uso:[/] {exc}")
        return EXIT_USAGE_ERROR
    except RequestError as exc:
        err_console.print(f"[bold red]Falha na requisição:[/] {exc}")
        return EXIT_REQUEST_ERROR

    console.print_json(orjson.dumps(result).decode())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
