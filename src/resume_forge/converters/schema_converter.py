"""Convert resumes between the FRESH and JSON Resume (JRS) dialects."""

from __future__ import annotations

import copy
import logging
from typing import Any

from resume_forge.errors import BuildError, ErrorKind
from resume_forge.models.resume import Dialect

logger = logging.getLogger(__name__)

FRESH_FORMAT_TAG = "FRESH@1.0.0"


def convert(data: dict[str, Any], to: Dialect) -> dict[str, Any]:
    """Convert ``data`` to the ``to`` dialect, returning a new document.

    Documents already in the target dialect are returned as a deep copy.
    Any failure is raised as a fatal CONVERSION_FAILURE.
    """
    source = Dialect.detect(data)
    if source is to:
        return copy.deepcopy(data)
    try:
        converted = to_jrs(data) if to is Dialect.JRS else to_fresh(data)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise BuildError(
            ErrorKind.CONVERSION_FAILURE,
            attempted=f"{source.value} -> {to.value}",
            inner=exc,
        ) from exc
    logger.debug("Converted resume %s -> %s", source.value, to.value)
    return converted


# ---------------------------------------------------------------------------
# FRESH -> JRS
# ---------------------------------------------------------------------------

def to_jrs(fresh: dict[str, Any]) -> dict[str, Any]:
    info = fresh.get("info") or {}
    contact = fresh.get("contact") or {}
    location = fresh.get("location") or {}

    basics = _prune({
        "name": fresh.get("name"),
        "label": info.get("label"),
        "image": info.get("image"),
        "email": contact.get("email"),
        "phone": contact.get("phone"),
        "url": contact.get("website"),
        "summary": info.get("brief"),
        "location": _prune({
            "address": location.get("address"),
            "postalCode": location.get("code"),
            "city": location.get("city"),
            "countryCode": location.get("country"),
            "region": location.get("region"),
        }) or None,
        "profiles": [
            _prune({"network": s.get("network"), "username": s.get("user"), "url": s.get("url")})
            for s in fresh.get("social") or []
        ] or None,
    })

    jrs: dict[str, Any] = {"basics": basics}
    jrs["work"] = [
        _prune({
            "name": job.get("employer"),
            "position": job.get("position"),
            "url": job.get("url"),
            "startDate": job.get("start"),
            "endDate": job.get("end"),
            "summary": job.get("summary"),
            "highlights": job.get("highlights"),
        })
        for job in _history(fresh, "employment")
    ]
    jrs["volunteer"] = [
        _prune({
            "organization": gig.get("organization"),
            "position": gig.get("position"),
            "url": gig.get("url"),
            "startDate": gig.get("start"),
            "endDate": gig.get("end"),
            "summary": gig.get("summary"),
            "highlights": gig.get("highlights"),
        })
        for gig in _history(fresh, "service")
    ]
    jrs["education"] = [
        _prune({
            "institution": edu.get("institution"),
            "area": edu.get("area"),
            "studyType": edu.get("studyType"),
            "startDate": edu.get("start"),
            "endDate": edu.get("end"),
            "score": edu.get("grade"),
            "courses": edu.get("curriculum"),
        })
        for edu in _history(fresh, "education")
    ]
    jrs["awards"] = [
        _prune({
            "title": rec.get("title"),
            "date": rec.get("date"),
            "awarder": rec.get("from"),
            "summary": rec.get("summary"),
        })
        for rec in fresh.get("recognition") or []
    ]
    jrs["publications"] = [
        _prune({
            "name": pub.get("title"),
            "publisher": _publisher_name(pub.get("publisher")),
            "releaseDate": pub.get("date"),
            "url": pub.get("url"),
            "summary": pub.get("summary"),
        })
        for pub in fresh.get("writing") or []
    ]
    jrs["skills"] = _skills_to_jrs(fresh.get("skills") or {})
    jrs["languages"] = [
        _prune({"language": lang.get("language"), "fluency": lang.get("level")})
        for lang in fresh.get("languages") or []
    ]
    jrs["interests"] = [
        _prune({"name": i.get("name"), "keywords": i.get("keywords")})
        for i in fresh.get("interests") or []
    ]
    jrs["references"] = [
        _prune({"name": ref.get("name"), "reference": ref.get("summary")})
        for ref in fresh.get("references") or []
    ]
    jrs["projects"] = [
        _prune({
            "name": p.get("title"),
            "description": p.get("summary") or p.get("description"),
            "highlights": p.get("highlights"),
            "keywords": p.get("keywords"),
            "startDate": p.get("start"),
            "endDate": p.get("end"),
            "url": p.get("url"),
            "roles": [p["role"]] if p.get("role") else None,
        })
        for p in fresh.get("projects") or []
    ]
    return {k: v for k, v in jrs.items() if v or k == "basics"}


def _skills_to_jrs(skills: dict[str, Any]) -> list[dict[str, Any]]:
    if skills.get("sets"):
        return [
            _prune({"name": s.get("name"), "level": s.get("level"), "keywords": s.get("skills")})
            for s in skills["sets"]
        ]
    return [
        _prune({"name": s.get("name"), "level": s.get("level")})
        for s in skills.get("list") or []
    ]


def _publisher_name(publisher: Any) -> Any:
    if isinstance(publisher, dict):
        return publisher.get("name")
    return publisher


# ---------------------------------------------------------------------------
# JRS -> FRESH
# ---------------------------------------------------------------------------

def to_fresh(jrs: dict[str, Any]) -> dict[str, Any]:
    basics = jrs.get("basics") or {}
    location = basics.get("location") or {}

    fresh: dict[str, Any] = {
        "name": basics.get("name"),
        "meta": {"format": FRESH_FORMAT_TAG},
        "info": _prune({
            "label": basics.get("label"),
            "image": basics.get("image") or basics.get("picture"),
            "brief": basics.get("summary"),
        }),
        "contact": _prune({
            "email": basics.get("email"),
            "phone": basics.get("phone"),
            "website": basics.get("url") or basics.get("website"),
        }),
        "location": _prune({
            "address": location.get("address"),
            "city": location.get("city"),
            "region": location.get("region"),
            "code": location.get("postalCode"),
            "country": location.get("countryCode"),
        }),
        "social": [
            _prune({
                "label": p.get("network"),
                "network": p.get("network"),
                "user": p.get("username"),
                "url": p.get("url"),
            })
            for p in basics.get("profiles") or []
        ],
    }
    fresh["employment"] = _as_history([
        _prune({
            "employer": job.get("name") or job.get("company"),
            "position": job.get("position"),
            "url": job.get("url") or job.get("website"),
            "start": job.get("startDate"),
            "end": job.get("endDate"),
            "summary": job.get("summary"),
            "highlights": job.get("highlights"),
        })
        for job in jrs.get("work") or []
    ])
    fresh["service"] = _as_history([
        _prune({
            "organization": v.get("organization"),
            "position": v.get("position"),
            "url": v.get("url") or v.get("website"),
            "start": v.get("startDate"),
            "end": v.get("endDate"),
            "summary": v.get("summary"),
            "highlights": v.get("highlights"),
        })
        for v in jrs.get("volunteer") or []
    ])
    fresh["education"] = _as_history([
        _prune({
            "institution": edu.get("institution"),
            "area": edu.get("area"),
            "studyType": edu.get("studyType"),
            "start": edu.get("startDate"),
            "end": edu.get("endDate"),
            "grade": edu.get("score") or edu.get("gpa"),
            "curriculum": edu.get("courses"),
        })
        for edu in jrs.get("education") or []
    ])
    skill_sets = [
        _prune({"name": s.get("name"), "level": s.get("level"), "skills": s.get("keywords")})
        for s in jrs.get("skills") or []
    ]
    fresh["skills"] = {"sets": skill_sets} if skill_sets else None
    fresh["recognition"] = [
        _prune({
            "title": a.get("title"),
            "date": a.get("date"),
            "from": a.get("awarder"),
            "summary": a.get("summary"),
        })
        for a in jrs.get("awards") or []
    ]
    fresh["writing"] = [
        _prune({
            "title": pub.get("name"),
            "publisher": {"name": pub["publisher"]} if pub.get("publisher") else None,
            "date": pub.get("releaseDate"),
            "url": pub.get("url") or pub.get("website"),
            "summary": pub.get("summary"),
        })
        for pub in jrs.get("publications") or []
    ]
    fresh["languages"] = [
        _prune({"language": lang.get("language"), "level": lang.get("fluency")})
        for lang in jrs.get("languages") or []
    ]
    fresh["interests"] = [
        _prune({"name": i.get("name"), "keywords": i.get("keywords")})
        for i in jrs.get("interests") or []
    ]
    fresh["references"] = [
        _prune({"name": ref.get("name"), "summary": ref.get("reference")})
        for ref in jrs.get("references") or []
    ]
    fresh["projects"] = [
        _prune({
            "title": p.get("name"),
            "summary": p.get("description"),
            "highlights": p.get("highlights"),
            "keywords": p.get("keywords"),
            "start": p.get("startDate"),
            "end": p.get("endDate"),
            "url": p.get("url"),
            "role": ", ".join(p["roles"]) if p.get("roles") else None,
        })
        for p in jrs.get("projects") or []
    ]
    return {k: v for k, v in fresh.items() if v or k == "name"}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _history(fresh: dict[str, Any], section: str) -> list[dict[str, Any]]:
    container = fresh.get(section) or {}
    if isinstance(container, list):
        return container
    return container.get("history") or []


def _as_history(items: list[dict[str, Any]]) -> dict[str, Any] | None:
    return {"history": items} if items else None


def _prune(d: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None or an empty container."""
    return {k: v for k, v in d.items() if v is not None and v != [] and v != {}}
