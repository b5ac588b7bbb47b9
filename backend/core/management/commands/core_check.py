import json
import sys

from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils import timezone

from core.checks import PROBES, run_checks


class Command(BaseCommand):
    help = "Run internal health checks (DB, cache, Celery) and print a summary for CI/CD pipelines."

    def add_arguments(self, parser):
        parser.add_argument("--db", action="store_true", help="Check database connectivity")
        parser.add_argument("--cache", action="store_true", help="Check cache connectivity")
        parser.add_argument("--celery", action="store_true", help="Check Celery connectivity (core ping task)")
        parser.add_argument("--json", action="store_true", help="Output as JSON (default is pretty text)")

    def handle(self, *args, **opts):
        out = run_checks([name for name in PROBES if opts.get(name)])
        results = {
            "time": timezone.now().isoformat(),
            "env": getattr(settings, "ENV", "dev"),
            "debug": bool(settings.DEBUG),
            **out,
        }

        if opts.get("json"):
            self.stdout.write(json.dumps(results, indent=2))
        else:
            self.stdout.write(f"\n=== Tradies Directory Health Check ({results['time']}) ===\n")
            self.stdout.write(f"Environment: {results['env']} | Debug={results['debug']}\n\n")
            for key, val in results["checks"].items():
                mark = "OK  " if val.get("ok") else "FAIL"
                err = f" ({val.get('error')})" if not val.get("ok") else ""
                self.stdout.write(f" {mark}  {key.upper()}{err}\n")
            self.stdout.write(f"\nOverall: {'OK' if results['ok'] else 'FAILED'}\n")

        # non-zero exit for CI
        if not results["ok"]:
            sys.exit(1)
