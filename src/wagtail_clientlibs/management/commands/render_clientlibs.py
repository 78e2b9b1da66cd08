"""Management command to print the markup for client library categories."""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandParser


class Command(BaseCommand):
    help = "Print the <link>/<script> markup rendered for client library categories."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "categories",
            nargs="+",
            help="Categories to include, in order.",
        )
        parser.add_argument(
            "--mode",
            default=None,
            help='"css" or "js". If omitted, renders CSS followed by JS.',
        )
        parser.add_argument(
            "--loading",
            default=None,
            help='Script loading attribute: "async" or "defer".',
        )
        parser.add_argument(
            "--onload",
            default=None,
            help="JavaScript for the script onload attribute.",
        )

    def handle(self, **options: object) -> None:
        from wagtail_clientlibs.utils import get_tag_builder

        categories = options.get("categories") or []
        markup = get_tag_builder().include(
            list(categories),  # type: ignore[call-overload]
            mode=options.get("mode"),
            loading=options.get("loading"),
            onload=options.get("onload"),
        )

        if not markup:
            self.stderr.write(
                f"No markup rendered for: {', '.join(categories)}"  # type: ignore[arg-type]
            )
            return

        self.stdout.write(markup)
