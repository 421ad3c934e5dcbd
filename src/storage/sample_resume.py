"""
Example resume served when no RESUME_PATH is configured.

Replace it by pointing RESUME_PATH at a JSON file with the same shape.
"""

SAMPLE_RESUME = {
    "personalInfo": {
        "name": "Your Name",
        "email": "your.email@example.com",
        "phone": "+1 (555) 123-4567",
        "location": "San Francisco, CA",
        "linkedIn": "https://linkedin.com/in/yourprofile",
        "github": "https://github.com/yourusername",
        "website": "https://yourwebsite.com",
    },
    "summary": (
        "Experienced software engineer with expertise in full-stack development, "
        "cloud technologies, and scalable system design."
    ),
    "experience": [
        {
            "company": "Tech Company Inc.",
            "position": "Senior Software Engineer",
            "startDate": "2022-01",
            "current": True,
            "description": "Lead development of cloud-native applications and microservices architecture",
            "achievements": [
                "Designed and implemented scalable APIs serving 1M+ requests/day",
                "Reduced deployment time by 80% through CI/CD automation",
                "Mentored 5 junior developers and led cross-functional teams",
            ],
        }
    ],
    "education": [
        {
            "institution": "Stanford University",
            "degree": "Bachelor of Science",
            "field": "Computer Science",
            "year": "2020",
            "gpa": "3.8",
        }
    ],
    "skills": {
        "technical": [
            "JavaScript", "TypeScript", "React", "Node.js",
            "Python", "AWS", "Docker", "Kubernetes",
        ],
        "languages": ["English (Native)", "Spanish (Conversational)"],
        "certifications": ["AWS Certified Solutions Architect"],
    },
    "projects": [
        {
            "name": "Open Source Project",
            "description": "A TypeScript library for building scalable web applications",
            "technologies": ["TypeScript", "Node.js", "Jest"],
            "url": "https://npm.js/package/your-project",
        }
    ],
}
