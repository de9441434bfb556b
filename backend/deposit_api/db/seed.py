"""
One-time loader for the JSON fixtures shipped with the demo
(companies.json, users.json, products.json).
"""
import json
import os
from typing import Dict, List

from sqlalchemy.orm import Session

from deposit_api.repositories.company_repo import CompanyRepository
from deposit_api.repositories.product_repo import ProductRepository
from deposit_api.repositories.user_repo import UserRepository
from deposit_api.utils.log import get_logger

log = get_logger("seed")

PROGRESS_EVERY = 1000


def read_json_list(path: str) -> List[dict]:
    """Load a JSON array; a missing or malformed file counts as empty."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.error("Error reading %s: %s", path, e)
        return []
    if not isinstance(data, list):
        log.error("Error reading %s: expected a JSON array", path)
        return []
    return data


def seed_from_directory(db: Session, data_dir: str) -> Dict[str, int]:
    companies = read_json_list(os.path.join(data_dir, "companies.json"))
    users = read_json_list(os.path.join(data_dir, "users.json"))
    products = read_json_list(os.path.join(data_dir, "products.json"))
    log.info(
        "Found %d companies, %d users, %d products",
        len(companies), len(users), len(products),
    )

    company_repo = CompanyRepository(db)
    user_repo = UserRepository(db)
    product_repo = ProductRepository(db)

    try:
        for c in companies:
            company_repo.create(id=c["id"], name=c["name"], registered_at=c["registeredAt"])
        log.info("Migrated %d companies", len(companies))

        for u in users:
            user_repo.create(
                id=u["id"],
                company_id=u["companyId"],
                first_name=u["firstName"],
                last_name=u["lastName"],
                email=u["email"],
                created_at=u["createdAt"],
            )
        log.info("Migrated %d users", len(users))

        for count, p in enumerate(products, start=1):
            product_repo.create(
                company_id=p["companyId"],
                registered_by_id=p["registeredById"],
                name=p["name"],
                packaging=p["packaging"],
                deposit=p["deposit"],
                volume=p["volume"],
                registered_at=p["registeredAt"],
                # fixtures keep their own state; unspecified means live
                active=bool(p.get("active", True)),
            )
            if count % PROGRESS_EVERY == 0:
                log.info("  Migrated %d/%d products...", count, len(products))
        log.info("Migrated %d products", len(products))

        db.commit()
    except Exception:
        db.rollback()
        raise

    return {"companies": len(companies), "users": len(users), "products": len(products)}
