# compass/content/career_fields.py
"""
Catalogue statique des filières de carrière.

Taille fixe, non éditable par l'utilisateur, jamais dérivé des données étudiant.
L'ORDRE du tuple CAREER_FIELDS est contractuel : il départage les ex-aequo
du classement (tri stable dans engine/roadmap/analysis.py).
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CareerFieldDefinition:
    key:            str
    field:          str
    category:       str
    description:    str
    career_paths:   Tuple[str, ...]
    education_path: Tuple[str, ...]
    skills:         Tuple[str, ...]
    requirements:   Tuple[str, ...]
    color:          str


CAREER_FIELDS: Tuple[CareerFieldDefinition, ...] = (
    # ── STEM ──────────────────────────────────────────────────
    CareerFieldDefinition(
        key="ENGINEERING",
        field="Engineering",
        category="STEM",
        description="Design, build, and maintain technological solutions to solve real-world problems",
        career_paths=("Software Engineer", "Mechanical Engineer", "Civil Engineer", "Electrical Engineer", "Data Scientist"),
        education_path=("B.Tech/B.E", "Specialized Engineering Courses", "M.Tech (Optional)", "Industry Certifications"),
        skills=("Problem-solving", "Mathematical reasoning", "Technical analysis", "Innovation"),
        requirements=("Strong aptitude (70%+)", "Good science foundation", "Logical thinking"),
        color="#2196F3",
    ),
    CareerFieldDefinition(
        key="MEDICINE",
        field="Medicine",
        category="Healthcare",
        description="Diagnose, treat, and care for patients while advancing medical knowledge",
        career_paths=("Doctor", "Surgeon", "Specialist", "Medical Researcher", "Healthcare Administrator"),
        education_path=("MBBS", "Specialization (MD/MS)", "Fellowship", "Continuous Medical Education"),
        skills=("Empathy", "Attention to detail", "Stress management", "Communication"),
        requirements=("High emotional intelligence (75%+)", "Strong science background", "Excellent memory"),
        color="#4CAF50",
    ),
    CareerFieldDefinition(
        key="COMPUTER_SCIENCE",
        field="Computer Science",
        category="Technology",
        description="Develop software, algorithms, and computing solutions for digital transformation",
        career_paths=("Software Developer", "Data Scientist", "AI/ML Engineer", "Cybersecurity Expert", "Product Manager"),
        education_path=("BCA/B.Tech CSE", "Programming Certifications", "M.Tech/MS (Optional)", "Industry Projects"),
        skills=("Logical thinking", "Problem-solving", "Creativity", "Continuous learning"),
        requirements=("High aptitude (75%+)", "Mathematical foundation", "Pattern recognition"),
        color="#9C27B0",
    ),

    # ── Business & Commerce ───────────────────────────────────
    CareerFieldDefinition(
        key="BUSINESS_MANAGEMENT",
        field="Business Management",
        category="Business",
        description="Lead organizations, manage teams, and drive strategic business growth",
        career_paths=("Business Manager", "Entrepreneur", "Consultant", "Operations Manager", "Strategy Analyst"),
        education_path=("BBA/B.Com", "MBA", "Industry Certifications", "Leadership Programs"),
        skills=("Leadership", "Communication", "Strategic thinking", "Team management"),
        requirements=("Good emotional intelligence (65%+)", "Interest in business", "People skills"),
        color="#FF9800",
    ),
    CareerFieldDefinition(
        key="FINANCE",
        field="Finance",
        category="Business",
        description="Manage financial resources, investments, and economic planning for growth",
        career_paths=("Financial Analyst", "Investment Banker", "CA/CPA", "Financial Planner", "Risk Manager"),
        education_path=("B.Com/BBA Finance", "CA/CMA/CS", "MBA Finance", "CFA/FRM"),
        skills=("Numerical ability", "Risk assessment", "Attention to detail", "Analytical thinking"),
        requirements=("Good aptitude (65%+)", "Strong commerce background", "Mathematical skills"),
        color="#795548",
    ),

    # ── Arts & Humanities ─────────────────────────────────────
    CareerFieldDefinition(
        key="MEDIA_COMMUNICATION",
        field="Media & Communication",
        category="Creative",
        description="Create content, communicate ideas, and influence public opinion through various media",
        career_paths=("Journalist", "Content Creator", "Public Relations", "Digital Marketer", "Film Director"),
        education_path=("Mass Communication", "Journalism", "Digital Marketing Courses", "Portfolio Development"),
        skills=("Creativity", "Communication", "Storytelling", "Social awareness"),
        requirements=("High emotional intelligence (70%+)", "Creative interests", "Communication skills"),
        color="#E91E63",
    ),
    CareerFieldDefinition(
        key="EDUCATION",
        field="Education",
        category="Social Service",
        description="Teach, mentor, and shape the next generation while contributing to society",
        career_paths=("Teacher", "Professor", "Educational Researcher", "Curriculum Designer", "School Administrator"),
        education_path=("B.Ed", "Subject Specialization", "M.Ed", "Ph.D (For Research)", "Teaching Certifications"),
        skills=("Patience", "Communication", "Empathy", "Subject expertise"),
        requirements=("High emotional intelligence (75%+)", "Interest in teaching", "Subject knowledge"),
        color="#607D8B",
    ),
    CareerFieldDefinition(
        key="PSYCHOLOGY",
        field="Psychology",
        category="Social Science",
        description="Understand human behavior and mental processes to help individuals and society",
        career_paths=("Clinical Psychologist", "Counselor", "Organizational Psychologist", "Researcher", "Therapist"),
        education_path=("B.A/B.Sc Psychology", "M.A/M.Sc Psychology", "Clinical Training", "Ph.D (Optional)"),
        skills=("Empathy", "Observation", "Analysis", "Communication"),
        requirements=("Very high emotional intelligence (80%+)", "Interest in human behavior", "Patience"),
        color="#3F51B5",
    ),

    # ── Créatif ───────────────────────────────────────────────
    CareerFieldDefinition(
        key="DESIGN",
        field="Design",
        category="Creative",
        description="Create visual solutions, user experiences, and aesthetic products",
        career_paths=("Graphic Designer", "UX/UI Designer", "Product Designer", "Fashion Designer", "Interior Designer"),
        education_path=("BFA/B.Des", "Portfolio Development", "Design Certifications", "Industry Projects"),
        skills=("Creativity", "Visual thinking", "Innovation", "Technical skills"),
        requirements=("Creative interests", "Visual orientation", "Innovation mindset"),
        color="#FF5722",
    ),
)
