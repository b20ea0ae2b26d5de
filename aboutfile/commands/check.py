"""aboutfile check / aboutfile type: classify filenames given on the command line."""
from __future__ import annotations

import sys

from aboutfile.commands import build_classifier, split_extensions
from aboutfile.models import FileReport


def _format_report(r: FileReport) -> str:
    status = "ok" if r.valid else "INVALID"
    if r.allowed is False and r.valid:
        status = "NOT ALLOWED"
    ext = r.extension if r.extension is not None else "-"
    parts = [f"{status:<11}", f"name={r.name!r}", f"ext={ext}"]
    if r.file_type is not None:
        kind = r.file_type if r.subtype is None else f"{r.file_type} ({r.subtype})"
        parts.append(f"type={kind}")
    return "  ".join(parts) + f"  {r.filename}"


def cmd_check(args) -> None:
    classifier = build_classifier()
    allowed = split_extensions(getattr(args, "allow", None))
    as_json = getattr(args, "json", False)

    failed = 0
    for filename in args.names:
        report = classifier.report(filename, allowed)
        if not report.valid or report.allowed is False:
            failed += 1
        if as_json:
            print(report.model_dump_json())
        else:
            print(_format_report(report))

    if failed:
        sys.exit(1)


def cmd_type(args) -> None:
    classifier = build_classifier()
    for filename in args.names:
        print(f"{classifier.file_type(filename)}\t{filename}")
