# storefront/data/seed.py
from storefront.data.database import SessionLocal
from storefront.data.models import ItemModel, UserModel
from storefront.domain.permissions import Permission
from storefront.services.auth_service import hash_password

SAMPLE_ITEMS = [
    {"title": "Belt", "description": "Black leather belt", "price": 2500, "image": "belt.jpg", "large_image": "belt-large.jpg"},
    {"title": "Shoes", "description": "Running shoes", "price": 8999, "image": "shoes.jpg", "large_image": "shoes-large.jpg"},
    {"title": "Hat", "description": "Wool winter hat", "price": 1500, "image": "hat.jpg", "large_image": "hat-large.jpg"},
]


def seed(db=None, admin_email: str = "admin@sickfits.com", admin_password: str = "admin"):
    own_session = db is None
    db = db or SessionLocal()
    try:
        # tylko jesli baza pusta
        if db.query(UserModel).first():
            return None
        admin = UserModel(
            name="Admin",
            email=admin_email,
            password=hash_password(admin_password),
            permissions=[p.value for p in Permission],
        )
        db.add(admin)
        db.flush()
        for data in SAMPLE_ITEMS:
            db.add(ItemModel(user_id=admin.id, **data))
        db.commit()
        return admin
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    seed()
