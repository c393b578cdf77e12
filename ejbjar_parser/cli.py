"""CLI for ejbjar-parser."""

import argparse
import logging
import os
import sys
import time

from ejbjar_parser.descriptor_reader import DescriptorReader
from ejbjar_parser.domain.models import DumpOptions, DumpResult, ParseOptions
from ejbjar_parser.output.json_dumper import JSONDumper
from ejbjar_parser.output.manifest_builder import ManifestBuilder
from ejbjar_parser.resolution.known_dtds import known_public_ids


def _parse_dtd_args(values: list[str] | None) -> dict[str, str]:
    """Turn repeated ``PUBLIC_ID=LOCATION`` arguments into a mapping."""
    locations: dict[str, str] = {}
    for value in values or []:
        public_id, sep, location = value.partition('=')
        if not sep or not public_id:
            raise argparse.ArgumentTypeError(f"Expected PUBLIC_ID=LOCATION, got {value!r}")
        locations[public_id] = location
    return locations


def dump_manifests(descriptor_paths: list[str], base_dir: str, output_dir: str | None,
                   options: DumpOptions) -> tuple[DumpResult, dict]:
    """Main orchestration: descriptors -> manifests -> JSON report."""
    start_time = time.time()

    reader = DescriptorReader(base_dir, options.parse)
    results, errors = reader.read_all(descriptor_paths)

    report = ManifestBuilder.build(results, errors, parse_duration=time.time() - start_time)

    if output_dir:
        dumper = JSONDumper(output_dir, pretty=options.pretty)
        dumper.write_manifest(report)
        dumper.write_errors(errors)

    return DumpResult(
        descriptors=len(descriptor_paths),
        files_collected=report['summary']['total_files'],
        errors_count=len(errors),
        output_dir=output_dir,
    ), report


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog='ejbjar-parser', description='EJB deployment descriptor reader')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log DTD registration and resolution')
    subparsers = parser.add_subparsers(dest='command')

    # manifest command
    manifest_parser = subparsers.add_parser('manifest', help='List the class files named by descriptors')
    manifest_parser.add_argument('descriptors', nargs='+', help='ejb-jar XML descriptor files')
    manifest_parser.add_argument('--srcdir', required=True, help='Directory holding the compiled classes')
    manifest_parser.add_argument('--output', help='Write manifest.json (and errors.json) to this directory')
    manifest_parser.add_argument('--dtd', action='append', metavar='PUBLIC_ID=LOCATION',
                                 help='Map a DTD public id to a file, bundled resource or URL (repeatable)')
    manifest_parser.add_argument('--strict', action='store_true', help='Fail on misplaced bean elements')
    manifest_parser.add_argument('--no-resolve', action='store_true', help='Do not load external DTDs')
    manifest_parser.add_argument('--no-pretty', action='store_true', help='Disable pretty printing')

    # dtds command
    subparsers.add_parser('dtds', help='List bundled DTD public ids')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command == 'manifest':
        missing = [p for p in args.descriptors if not os.path.isfile(p)]
        if missing:
            print(f"Error: {', '.join(missing)} not found", file=sys.stderr)
            sys.exit(1)

        try:
            dtd_locations = _parse_dtd_args(args.dtd)
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))

        options = DumpOptions(
            pretty=not args.no_pretty,
            parse=ParseOptions(
                strict=args.strict,
                resolve_entities=not args.no_resolve,
                dtd_locations=dtd_locations,
            ),
        )
        result, report = dump_manifests(args.descriptors, args.srcdir, args.output, options)

        if result.output_dir:
            print(f"Done! Collected {result.files_collected} class files "
                  f"from {result.descriptors} descriptors ({result.errors_count} errors)")
            print(f"Output: {result.output_dir}")
        else:
            print(JSONDumper('', pretty=options.pretty).dumps(report))

        if result.errors_count:
            sys.exit(2)

    elif args.command == 'dtds':
        for public_id in known_public_ids():
            print(f"  {public_id}")

    else:
        parser.print_help()


if __name__ == '__main__':
    main()
