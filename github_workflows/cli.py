"""CLI commands for GitHub Actions workflows."""

import argparse
import json
import logging
import sys


def _workflow_arg(value: str) -> int | str:
    """All-digit values are workflow IDs, anything else is a file name."""
    return int(value) if value.isdigit() else value


def _parse_inputs(pairs: list[str]) -> dict:
    inputs = {}
    for p in pairs:
        k, sep, v = p.partition("=")
        if not sep:
            raise SystemExit(f"--input expects KEY=VALUE, got {p!r}")
        try:
            inputs[k] = json.loads(v)
        except ValueError:
            inputs[k] = v
    return inputs


def _add_target_args(parser: argparse.ArgumentParser, workflow: bool = True):
    parser.add_argument("owner", help="Repository owner (user or organization)")
    parser.add_argument("repo", help="Repository name")
    if workflow:
        parser.add_argument(
            "workflow",
            type=_workflow_arg,
            help="Workflow ID or file name (e.g., 72844 or main.yml)",
        )


def _print_json(data):
    json.dump(data, sys.stdout, indent=2)
    sys.stdout.write("\n")


def main():
    parser = argparse.ArgumentParser(
        description="Manage GitHub Actions workflows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every request",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list subcommand
    list_parser = subparsers.add_parser("list", help="List workflows in a repository")
    _add_target_args(list_parser, workflow=False)
    list_parser.add_argument("--page", type=int, default=None, help="Page number to fetch")
    list_parser.add_argument("--per-page", type=int, default=None, help="Results per page (max 100)")

    get_parser = subparsers.add_parser("get", help="Get a workflow")
    _add_target_args(get_parser)

    usage_parser = subparsers.add_parser("usage", help="Get billable usage of a workflow")
    _add_target_args(usage_parser)

    # dispatch subcommand
    dispatch_parser = subparsers.add_parser("dispatch", help="Trigger a workflow_dispatch event")
    _add_target_args(dispatch_parser)
    dispatch_parser.add_argument(
        "--ref",
        required=True,
        help="Git reference (branch, tag or SHA) to run the workflow on",
    )
    dispatch_parser.add_argument(
        "--input",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Workflow input (repeatable; VALUE is parsed as JSON when possible)",
    )

    enable_parser = subparsers.add_parser("enable", help="Enable a workflow")
    _add_target_args(enable_parser)

    disable_parser = subparsers.add_parser("disable", help="Disable a workflow")
    _add_target_args(disable_parser)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not args.verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

    if args.command is None:
        parser.print_help()
        return

    from .client import get_client
    from .errors import APIError
    from .models import CreateWorkflowDispatchEventRequest, ListOptions

    actions = get_client().actions
    by_id = isinstance(getattr(args, "workflow", None), int)
    try:
        if args.command == "list":
            opts = ListOptions(page=args.page, per_page=args.per_page)
            workflows, _ = actions.list_workflows(args.owner, args.repo, opts)
            _print_json(workflows.to_dict())
        elif args.command == "get":
            get = actions.get_workflow_by_id if by_id else actions.get_workflow_by_file_name
            workflow, _ = get(args.owner, args.repo, args.workflow)
            _print_json(workflow.to_dict())
        elif args.command == "usage":
            usage_of = actions.get_workflow_usage_by_id if by_id else actions.get_workflow_usage_by_file_name
            usage, _ = usage_of(args.owner, args.repo, args.workflow)
            _print_json(usage.to_dict())
        elif args.command == "dispatch":
            dispatch = (
                actions.create_workflow_dispatch_event_by_id
                if by_id
                else actions.create_workflow_dispatch_event_by_file_name
            )
            event = CreateWorkflowDispatchEventRequest(ref=args.ref, inputs=_parse_inputs(args.input))
            resp = dispatch(args.owner, args.repo, args.workflow, event)
            _print_json({"status": resp.status_code})
        elif args.command == "enable":
            enable = actions.enable_workflow_by_id if by_id else actions.enable_workflow_by_file_name
            resp = enable(args.owner, args.repo, args.workflow)
            _print_json({"status": resp.status_code})
        elif args.command == "disable":
            disable = actions.disable_workflow_by_id if by_id else actions.disable_workflow_by_file_name
            resp = disable(args.owner, args.repo, args.workflow)
            _print_json({"status": resp.status_code})
    except APIError as e:
        print(f"GitHub API error {e.status_code}: {e.message}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
