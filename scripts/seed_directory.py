import os
import random
import sys

import django

# --- Fix project path ---
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(os.path.join(BASE_DIR, "backend"))

# --- Set Django settings ---
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tradies_backend.settings.dev")
django.setup()

from django.contrib.auth import get_user_model
from business.choices import REGIONS, SERVICES
from business.models import Company, Location, Review
from identity.services import register_user
from jobs.models import JOB_TYPES, Job

User = get_user_model()

# (region, address, lat, long) anchors for demo listings
ANCHORS = [
    (REGIONS[0], "1 The Corso, Manly NSW 2095", -33.7995, 151.2849),
    (REGIONS[0], "20 Howard Ave, Dee Why NSW 2099", -33.7521, 151.2867),
    (REGIONS[1], "100 Queen St, Brisbane City QLD 4000", -27.4689, 153.0235),
    (REGIONS[1], "30 Brunswick St, Fortitude Valley QLD 4006", -27.4575, 153.0355),
]
TIERS = ("basic", "pro", "enterprise")


def _user(email, user_type, full_name):
    user = User.objects.filter(email=email).first()
    if user is None:
        user = register_user(email=email, password="demo1234", user_type=user_type, full_name=full_name)
    return user


def seed_directory(count=8):
    seeker = _user("seeker@demo.test", "seeker", "Demo Seeker")

    for n in range(count):
        region, address, lat, lng = ANCHORS[n % len(ANCHORS)]
        service = SERVICES[n % len(SERVICES)]
        owner = _user(f"owner{n + 1}@demo.test", "business", f"Owner {n + 1}")
        company = owner.company
        created = not company.name

        company.name = f"{service} Co {n + 1}"
        company.abn = f"{51824753556 + n:011d}"
        company.location = Location(address=address, lat=lat, long=lng, region=region)
        company.services = [service]
        company.subscription_tier = TIERS[n % len(TIERS)]
        company.verified = True
        company.description = f"Local {service.lower()} specialists."
        company.save()
        print(f"{'Created' if created else 'Updating'} {company.name} ({company.tier})")

        if not company.reviews.filter(user=seeker).exists():
            Review.objects.create(
                company=company, user=seeker, rating=random.randint(3, 5), comment="Great job, on time.",
            )

        if company.tier != "basic" and not company.jobs.exists():
            Job.objects.create(
                user=owner,
                company=company,
                title=f"{service} apprentice",
                description=f"{company.name} is hiring.",
                location=company.location,
                job_type=JOB_TYPES[n % len(JOB_TYPES)],
                contact_email=owner.email,
            )

    print(f"Seeded {Company.objects.verified().count()} listed companies.")


if __name__ == "__main__":
    seed_directory()
