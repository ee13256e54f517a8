from datetime import timedelta

from sqlalchemy import DateTime
from sqlmodel import Session, SQLModel

from app.models.base import utc_now
from app.models.subscription import PremiumPlan, Subscription
from app.models.user import User


def make_user():
    return User(
        first_name="Asha", last_name="Rao", email="asha@example.com", password="digest",
        phone="9876543210", address="12 MG Road", city="Bengaluru", pincode="560001",
    )


def test_timestamp_columns_are_timezone_aware(app):
    columns = [
        column
        for table in SQLModel.metadata.sorted_tables
        for column in table.columns
        if isinstance(column.type, DateTime)
    ]

    assert {f"{c.table.name}.{c.name}" for c in columns} >= {
        "user.created_at",
        "book.created_at",
        "transaction.created_at",
        "transaction.updated_at",
        "review.created_at",
        "subscription.start_date",
        "subscription.end_date",
        "subscription.created_at",
    }
    assert all(column.type.timezone for column in columns)


def test_default_timestamps_carry_utc():
    user = make_user()

    assert user.created_at.utcoffset() == timedelta(0)
    assert utc_now().utcoffset() == timedelta(0)


def test_timestamped_rows_can_be_written(client, engine):
    with Session(engine) as session:
        user = make_user()
        session.add(user)
        session.commit()
        session.refresh(user)

        start = utc_now()
        subscription = Subscription(
            user_id=user.id,
            plan=PremiumPlan.monthly,
            amount=99,
            start_date=start,
            end_date=start + timedelta(days=30),
        )
        session.add(subscription)
        session.commit()
        session.refresh(subscription)

        assert subscription.id is not None
        assert subscription.end_date - subscription.start_date == timedelta(days=30)
