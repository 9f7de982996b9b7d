"""Competitive exams and their subjects for PYQ quizzes."""

EXAM_SUBJECTS: dict[str, list[str]] = {
    "UPSC Civil Services": [
        "History",
        "Geography",
        "Polity & Governance",
        "Economy",
        "Environment & Ecology",
        "Science & Technology",
        "Current Affairs",
    ],
    "SSC CGL": [
        "Quantitative Aptitude",
        "General Intelligence & Reasoning",
        "English Language",
        "General Awareness",
    ],
    "IBPS PO": [
        "Reasoning Ability",
        "Quantitative Aptitude",
        "English Language",
        "General Awareness",
        "Computer Aptitude",
    ],
    "SBI PO": [
        "Reasoning Ability",
        "Quantitative Aptitude",
        "English Language",
        "General/Economy/Banking Awareness",
        "Computer Aptitude",
    ],
    "RRB NTPC": [
        "Mathematics",
        "General Intelligence and Reasoning",
        "General Awareness",
    ],
    "NEET": ["Physics", "Chemistry", "Biology"],
    "JEE Main": ["Physics", "Chemistry", "Mathematics"],
    "JEE Advanced": ["Physics", "Chemistry", "Mathematics"],
    "CAT": [
        "Verbal Ability & Reading Comprehension",
        "Data Interpretation & Logical Reasoning",
        "Quantitative Ability",
    ],
    "GATE": [
        "Aerospace Engineering",
        "Chemical Engineering",
        "Civil Engineering",
        "Computer Science & Information Technology",
        "Electrical Engineering",
        "Electronics & Communication Engineering",
        "Mechanical Engineering",
    ],
    "CLAT": [
        "English Language",
        "Current Affairs, including General Knowledge",
        "Legal Reasoning",
        "Logical Reasoning",
        "Quantitative Techniques",
    ],
    "NDA": ["Mathematics", "General Ability Test"],
    "CDS": ["English", "General Knowledge", "Elementary Mathematics"],
}


def list_exams() -> list[str]:
    """Get exam names in catalog order."""
    return list(EXAM_SUBJECTS)


def find_exam(name: str) -> str | None:
    """
    Look up an exam by name, ignoring case and surrounding whitespace.

    Args:
        name: Exam name as typed by the user

    Returns:
        The catalog spelling of the exam, or None if it isn't listed
    """
    wanted = name.strip().lower()
    for exam in EXAM_SUBJECTS:
        if exam.lower() == wanted:
            return exam
    return None


def get_subjects(exam: str) -> list[str]:
    """Get the subjects for an exam (empty list for unknown exams)."""
    catalog_name = find_exam(exam)
    if catalog_name is None:
        return []
    return list(EXAM_SUBJECTS[catalog_name])
