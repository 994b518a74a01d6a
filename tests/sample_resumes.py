"""Resume documents shared by the test modules."""
import copy

# 49 words; 5 bullets (4 experience + 1 project highlight):
# action verbs 4/5 = 80%, quantifiable 3/5 = 60%, impact words 2/5 = 40%,
# completeness 8/8 = 100% -> score 40 + 20 + 15 + 15 = 90
SAMPLE_RESUME = {
    "id": "resume-1",
    "userId": "user-1",
    "title": "Backend Resume",
    "targetRole": "Backend Engineer",
    "template": "modern",
    "personalInfo": {
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-0100",
        "location": "Austin, TX",
        "linkedin": "linkedin.com/in/janedoe",
        "github": "",
        "portfolio": None,
    },
    "summary": "Backend engineer with 6 years of experience building APIs.",
    "experience": [
        {
            "company": "Acme",
            "position": "Software Engineer",
            "location": "Remote",
            "startDate": "2019-01",
            "endDate": "present",
            "current": True,
            "description": [
                "Led migration of billing services to Kubernetes",
                "Reduced API latency by 35% through caching",
                "Built internal tooling that improved onboarding for 200+ engineers",
                "Worked on various support tickets",
            ],
        }
    ],
    "education": [
        {
            "institution": "State University",
            "degree": "BS",
            "field": "Computer Science",
            "startDate": "2014",
            "endDate": "2018",
            "gpa": "3.7",
            "achievements": ["Graduated with honors"],
        }
    ],
    "skills": [{"category": "Languages", "items": ["Python", "Go"]}],
    "projects": [
        {
            "name": "Tracker",
            "description": "Personal finance tracker",
            "technologies": ["Python"],
            "link": "",
            "highlights": ["Automated monthly reports for 3 users"],
        }
    ],
}


def sample_resume() -> dict:
    return copy.deepcopy(SAMPLE_RESUME)


def resume_with_bullets(bullets: list[str]) -> dict:
    """A resume whose only content is one experience entry with these bullets."""
    return {"experience": [{"company": "Acme", "position": "Engineer", "description": list(bullets)}]}
