# chat/symptoms.py
from typing import List

# known symptom -> specialists usually consulted for it
SYMPTOM_SPECIALISTS = {
    "headache": ["General Physician", "Neurologist"],
    "severe headache": ["Neurologist", "Emergency Medicine"],
    "dizziness": ["ENT Specialist", "Neurologist", "Cardiologist"],
    "chest pain": ["Cardiologist", "Emergency Medicine"],
    "shortness of breath": ["Pulmonologist", "Cardiologist"],
    "palpitations": ["Cardiologist", "Endocrinologist"],
    "stomach pain": ["Gastroenterologist", "General Surgeon"],
    "nausea": ["Gastroenterologist", "General Physician"],
    "vomiting": ["Gastroenterologist", "General Physician"],
    "diarrhea": ["Gastroenterologist"],
    "cough": ["Pulmonologist", "General Physician"],
    "sore throat": ["ENT Specialist", "General Physician"],
    "runny nose": ["ENT Specialist", "Allergist"],
    "fever": ["General Physician", "Infectious Disease Specialist"],
    "fatigue": ["General Physician", "Endocrinologist"],
    "body aches": ["General Physician", "Rheumatologist"],
    "rash": ["Dermatologist", "Allergist"],
    "itching": ["Dermatologist", "Allergist"],
    "back pain": ["Orthopedist", "Neurologist", "Physiotherapist"],
    "joint pain": ["Rheumatologist", "Orthopedist"],
    "numbness": ["Neurologist", "Orthopedist"],
    "vision changes": ["Ophthalmologist", "Neurologist"],
    "anxiety": ["Psychiatrist", "Psychologist"],
    "depression": ["Psychiatrist", "Psychologist"],
    "insomnia": ["Sleep Specialist", "Psychiatrist"],
    "menstrual cramps": ["Gynecologist"],
    "irregular periods": ["Gynecologist", "Endocrinologist"],
    "pelvic pain": ["Gynecologist"],
    "period problems": ["Gynecologist"],
    "pregnancy symptoms": ["Gynecologist", "Obstetrician"],
}

# everyday phrasing -> known symptom
SYMPTOM_ALIASES = {
    "can't sleep": "insomnia",
    "cant sleep": "insomnia",
    "trouble sleeping": "insomnia",
    "not sleeping well": "insomnia",
    "difficulty sleeping": "insomnia",
    "can't breathe": "shortness of breath",
    "cant breathe": "shortness of breath",
    "hard to breathe": "shortness of breath",
    "breathing difficulty": "shortness of breath",
    "breathless": "shortness of breath",
    "out of breath": "shortness of breath",
    "throwing up": "vomiting",
    "been sick": "vomiting",
    "feel sick": "nausea",
    "feeling sick": "nausea",
    "queasy": "nausea",
    "nauseous": "nausea",
    "tummy ache": "stomach pain",
    "belly pain": "stomach pain",
    "stomach hurts": "stomach pain",
    "tummy hurts": "stomach pain",
    "abdominal pain": "stomach pain",
    "heart racing": "palpitations",
    "heart beating fast": "palpitations",
    "heart pounding": "palpitations",
    "feeling tired": "fatigue",
    "so tired": "fatigue",
    "exhausted": "fatigue",
    "no energy": "fatigue",
    "worn out": "fatigue",
    "feeling sad": "depression",
    "feeling down": "depression",
    "feeling low": "depression",
    "feeling blue": "depression",
    "feeling worried": "anxiety",
    "feeling anxious": "anxiety",
    "feeling nervous": "anxiety",
    "stressed out": "anxiety",
    "panicky": "anxiety",
    "pain in chest": "chest pain",
    "chest hurts": "chest pain",
    "pain in back": "back pain",
    "back hurts": "back pain",
    "my back is killing me": "back pain",
    "pain in head": "headache",
    "head hurts": "headache",
    "my head is pounding": "headache",
    "migraine": "severe headache",
    "high temperature": "fever",
    "feeling hot": "fever",
    "feverish": "fever",
    "burning up": "fever",
    "running a fever": "fever",
    "throat hurts": "sore throat",
    "scratchy throat": "sore throat",
    "painful swallowing": "sore throat",
    "stuffy nose": "runny nose",
    "blocked nose": "runny nose",
    "congested": "runny nose",
    "skin rash": "rash",
    "spots on skin": "rash",
    "breakout": "rash",
    "itchy skin": "itching",
    "joints hurt": "joint pain",
    "achy joints": "joint pain",
    "stiff joints": "joint pain",
    "body is aching": "body aches",
    "everything hurts": "body aches",
    "muscles aching": "body aches",
    "pins and needles": "numbness",
    "tingling": "numbness",
    "can't see well": "vision changes",
    "blurry vision": "vision changes",
    "vision is blurry": "vision changes",
    "light headed": "dizziness",
    "lightheaded": "dizziness",
    "room is spinning": "dizziness",
    "vertigo": "dizziness",
    "loose stools": "diarrhea",
    "upset stomach": "diarrhea",
    "the runs": "diarrhea",
    "coughing": "cough",
    "hacking cough": "cough",
    "persistent cough": "cough",
}


def extract_symptoms(message: str) -> List[str]:
    """Known symptom names found in the message, direct mentions first, then aliases."""
    text = (message or "").lower()
    found = [name for name in SYMPTOM_SPECIALISTS if name in text]
    for phrase, symptom in SYMPTOM_ALIASES.items():
        if phrase in text and symptom not in found:
            found.append(symptom)
    return found


def specialists_for(symptoms) -> List[str]:
    seen = []
    for symptom in symptoms:
        for specialist in SYMPTOM_SPECIALISTS.get(symptom, []):
            if specialist not in seen:
                seen.append(specialist)
    return seen


def summarize(symptoms) -> str:
    return f"Symptoms: {', '.join(symptoms)}"
