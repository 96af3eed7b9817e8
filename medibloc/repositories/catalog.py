from starlette.concurrency import run_in_threadpool

from medibloc.core.repository import SqlAlchemyRepository
from medibloc.models.symptom import Symptom
from medibloc.schemas.catalog import DiseaseOut, DiseaseWithSymptomsOut, SymptomOut


class DiseaseRepository(SqlAlchemyRepository):
    """Diseases plus the disease <-> symptom links."""

    def _symptoms_of(self, disease_id: int) -> list[SymptomOut] | None:
        with self.session() as db:
            disease = db.get(self.model, disease_id)
            if not disease:
                return None
            return [SymptomOut.model_validate(s) for s in disease.symptoms]

    def _link(self, disease_id: int, symptom_id: int, attach: bool) -> DiseaseWithSymptomsOut | None:
        with self.session() as db:
            disease = db.get(self.model, disease_id)
            symptom = db.get(Symptom, symptom_id)
            if not disease or not symptom:
                return None
            if attach and symptom not in disease.symptoms:
                disease.symptoms.append(symptom)
            elif not attach and symptom in disease.symptoms:
                disease.symptoms.remove(symptom)
            db.flush()
            return DiseaseWithSymptomsOut.model_validate(disease)

    async def symptoms_of(self, disease_id: int) -> list[SymptomOut] | None:
        return await run_in_threadpool(self._symptoms_of, disease_id)

    async def add_symptom(self, disease_id: int, symptom_id: int) -> DiseaseWithSymptomsOut | None:
        return await run_in_threadpool(self._link, disease_id, symptom_id, True)

    async def remove_symptom(self, disease_id: int, symptom_id: int) -> DiseaseWithSymptomsOut | None:
        return await run_in_threadpool(self._link, disease_id, symptom_id, False)


class SymptomRepository(SqlAlchemyRepository):

    def _diseases_of(self, symptom_id: int) -> list[DiseaseOut] | None:
        with self.session() as db:
            symptom = db.get(self.model, symptom_id)
            if not symptom:
                return None
            return [DiseaseOut.model_validate(d) for d in symptom.diseases]

    async def diseases_of(self, symptom_id: int) -> list[DiseaseOut] | None:
        return await run_in_threadpool(self._diseases_of, symptom_id)
