"""
Patients and doctors are profile rows hanging off a ``users`` row. Creating
one creates both; name changes land on the user, the rest on the profile;
deleting the profile deletes the user too.
"""
from collections.abc import Mapping
from typing import Any

from starlette.concurrency import run_in_threadpool

from medibloc.core.passwords import hash_password
from medibloc.core.repository import SqlAlchemyRepository
from medibloc.models.user import User

USER_FIELDS = ("first_name", "last_name")


class ProfileRepository(SqlAlchemyRepository):
    role: str = "PATIENT"

    def _create(self, data: Mapping[str, Any]):
        values = self._create_values(data)
        with self.session() as db:
            user = User(
                email=values.pop("email").strip().lower(),
                password_hash=hash_password(values.pop("password")),
                first_name=values.pop("first_name"),
                last_name=values.pop("last_name"),
                role=self.role,
                is_active=True,
            )
            db.add(user)
            db.flush()

            obj = self.model(user_id=user.id, **values)
            db.add(obj)
            db.flush()
            db.refresh(obj)
            return self.to_out(obj)

    def _update(self, id: int, data: Mapping[str, Any]):
        values = self._update_values(data)
        with self.session() as db:
            obj = db.get(self.model, id)
            if not obj:
                return None
            for key, value in values.items():
                target = obj.user if key in USER_FIELDS else obj
                setattr(target, key, value)
            db.flush()
            db.refresh(obj)
            return self.to_out(obj)

    def _delete(self, id: int):
        with self.session() as db:
            obj = db.get(self.model, id)
            if not obj:
                return None
            out = self.to_out(obj)
            user = obj.user
            db.delete(obj)
            db.flush()
            db.delete(user)
            return out


class PatientRepository(ProfileRepository):
    role = "PATIENT"


class DoctorRepository(ProfileRepository):
    role = "DOCTOR"

    def _specialties(self) -> list[str]:
        with self.session() as db:
            rows = (
                db.query(self.model.specialty)
                .filter(self.model.specialty.is_not(None))
                .distinct()
                .order_by(self.model.specialty.asc())
                .all()
            )
            return [r[0] for r in rows]

    async def specialties(self) -> list[str]:
        return await run_in_threadpool(self._specialties)
