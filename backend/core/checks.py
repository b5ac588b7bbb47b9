"""Component probes shared by the deep-health endpoint and `manage.py core_check`."""
from __future__ import annotations

import time
from typing import Dict

from django.core.cache import cache
from django.db import connection


def check_db() -> Dict:
    try:
        with connection.cursor() as cur:
            cur.execute("SELECT 1;")
            cur.fetchone()
        return {"ok": True}
    except Exception as e:
        return {"ok": False, "error": str(e)}


def check_cache() -> Dict:
    key, val = "core_check_probe", str(time.time())
    try:
        cache.set(key, val, timeout=10)
        got = cache.get(key)
    except Exception as e:
        return {"ok": False, "error": str(e)}
    return {"ok": True} if got == val else {"ok": False, "error": "Cache mismatch"}


def check_celery() -> Dict:
    from .tasks import ping
    try:
        val = ping.delay().get(timeout=5)
    except Exception as e:
        return {"ok": False, "error": str(e)}
    return {"ok": val == "pong"}


PROBES = {"db": check_db, "cache": check_cache, "celery": check_celery}


def run_checks(names) -> Dict:
    results = {name: PROBES[name]() for name in names}
    return {"ok": all(r["ok"] for r in results.values()), "checks": results}
