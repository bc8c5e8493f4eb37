"""Payment repository (read-only lookups)."""

from sqlmodel import Session, select

from drivingschool.models.payment import Payment


class PaymentRepository:
    """Repository for Payment lookups."""

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> list[Payment]:
        statement = select(Payment).order_by(Payment.payment_date.desc(), Payment.id.desc())
        return list(self.session.exec(statement).all())

    def get_by_trainee(self, trainee_id: int) -> list[Payment]:
        statement = (select(Payment).where(Payment.trainee_id == trainee_id)
                     .order_by(Payment.payment_date.desc(), Payment.id.desc()))
        return list(self.session.exec(statement).all())
