from __future__ import annotations

from typing import List, Optional

from rest_framework.exceptions import NotFound

from .models import Company


def company_for(user) -> Company:
    company = Company.objects.filter(user=user).first()
    if company is None:
        raise NotFound("No company profile for this account.")
    return company


def onboarding_steps(company: Optional[Company]) -> List[dict]:
    return [
        {"key": "sign_up", "label": "Sign Up", "done": True},
        {"key": "complete_profile", "label": "Complete Profile", "done": bool(company and company.profile_complete)},
        {"key": "choose_plan", "label": "Choose Plan", "done": bool(company and company.tier != "basic")},
    ]
