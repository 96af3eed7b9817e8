from medibloc.models.appointment import Appointment
from medibloc.models.country import Country
from medibloc.models.disease import Disease, disease_symptoms
from medibloc.models.doctor import Doctor
from medibloc.models.medical_record import MedicalRecord
from medibloc.models.medicine import Medicine
from medibloc.models.patient import Patient
from medibloc.models.patient_disease import PatientDisease
from medibloc.models.pharmacy import Pharmacy
from medibloc.models.prescription import Prescription
from medibloc.models.symptom import Symptom
from medibloc.models.user import User

__all__ = [ "Appointment", "Country", "Disease", "disease_symptoms",
           "Doctor", "MedicalRecord", "Medicine", "Patient", "PatientDisease",
           "Pharmacy", "Prescription", "Symptom", "User" ]
