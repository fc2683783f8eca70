"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with application services
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from src.cli.formatters import format_output
from src.domain.base.exceptions import DomainException
from src.infrastructure.exceptions import InfrastructureError
from src.infrastructure.logging.logger import get_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]),
        description="Stemcell Core - stemcell CID resolution and VM deletion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s stemcells upload --name ubuntu --os jammy --version 1.2 --cid ami-1 --cpi aws-east
  %(prog)s stemcells resolve-cid --deployment web --name ubuntu --version 1.2 --az z1
  %(prog)s deployments stemcells --deployment web --format table
  %(prog)s vms delete --cid i-0123456789abcdef0 --force
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--version', action='version', version='%(prog)s 0.1.0')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Stemcells resource
    stemcells_parser = subparsers.add_parser('stemcells', help='Manage stemcells')
    stemcells_subparsers = stemcells_parser.add_subparsers(dest='action', help='Stemcell actions')

    stemcells_subparsers.add_parser('list', help='List uploaded stemcells')

    upload = stemcells_subparsers.add_parser('upload', help='Register an uploaded stemcell')
    upload.add_argument('--name', required=True, help='Stemcell name')
    upload.add_argument('--os', default='', help='Stemcell operating system')
    upload.add_argument('--version', required=True, dest='stemcell_version', help='Stemcell version')
    upload.add_argument('--cid', required=True, help='CID of the stemcell on the CPI')
    upload.add_argument('--cpi', default='', help='CPI the stemcell was uploaded to')

    resolve = stemcells_subparsers.add_parser('resolve-cid', help='Resolve the stemcell CID for an AZ')
    resolve.add_argument('--deployment', required=True, help='Deployment name')
    identity = resolve.add_mutually_exclusive_group(required=True)
    identity.add_argument('--name', help='Stemcell name')
    identity.add_argument('--os', help='Stemcell operating system')
    resolve.add_argument('--version', required=True, dest='stemcell_version', help='Stemcell version')
    resolve.add_argument('--az', help='Availability zone')

    # Deployments resource
    deployments_parser = subparsers.add_parser('deployments', help='Inspect deployments')
    deployments_subparsers = deployments_parser.add_subparsers(dest='action', help='Deployment actions')
    deployment_stemcells = deployments_subparsers.add_parser('stemcells', help='List bound stemcells')
    deployment_stemcells.add_argument('--deployment', required=True, help='Deployment name')

    # VMs resource
    vms_parser = subparsers.add_parser('vms', help='Manage VMs')
    vms_subparsers = vms_parser.add_subparsers(dest='action', help='VM actions')
    delete = vms_subparsers.add_parser('delete', help='Delete a VM by CID on the default CPI')
    delete.add_argument('--cid', required=True, help='VM CID')
    delete.add_argument('--force', action='store_true', default=None, help='Ignore CPI errors')
    delete.add_argument('--virtual', action='store_true', default=None,
                        help='Forget the VM without calling the CPI')

    return parser.parse_args(argv)


def _stemcell_spec(args: argparse.Namespace) -> Dict[str, str]:
    spec = {'name': args.name} if args.name else {'os': args.os}
    spec['version'] = args.stemcell_version
    return spec


def execute_command(args: argparse.Namespace, app) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)
    service = app.stemcell_service

    if handler_key == ('stemcells', 'list'):
        return {'stemcells': [s.to_dict() for s in service.list_stemcells()]}

    if handler_key == ('stemcells', 'upload'):
        return service.upload_stemcell(
            name=args.name,
            operating_system=args.os,
            version=args.stemcell_version,
            cid=args.cid,
            cpi=args.cpi,
        ).to_dict()

    if handler_key == ('stemcells', 'resolve-cid'):
        return service.resolve_cid(args.deployment, _stemcell_spec(args), args.az).to_dict()

    if handler_key == ('deployments', 'stemcells'):
        return {
            'deployment': args.deployment,
            'stemcells': [s.to_dict() for s in service.get_deployment_stemcells(args.deployment)],
        }

    if handler_key == ('vms', 'delete'):
        app.vm_deleter(force=args.force, enable_virtual_delete_vm=args.virtual).delete_vm_by_cid(args.cid)
        return {'cid': args.cid, 'status': 'done'}

    raise ValueError(f"Unknown command: {args.resource} {args.action}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    if not args.resource:
        print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
        return 1

    if not getattr(args, 'action', None):
        print(f"Error: No action specified for {args.resource}. Use --help for usage information.",
              file=sys.stderr)
        return 1

    try:
        from src.bootstrap import create_application
        app = create_application(args.config)
    except DomainException as e:
        print(f"Error: Failed to initialize application: {e}", file=sys.stderr)
        return 1

    try:
        result = execute_command(args, app)
    except (DomainException, InfrastructureError) as e:
        logger.error(f"Command failed: {e}")
        if not args.quiet:
            print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(result, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
