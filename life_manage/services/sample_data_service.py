"""Sample data for trying the app out."""

from datetime import datetime, timedelta
import logging
import time

from life_manage.services.gateway import PersistenceGateway
from life_manage.utils.clock import utcnow

logger = logging.getLogger(__name__)

DAY = 24 * 60 * 60

SAMPLE_PROJECTS = [
    {
        "title": "Website Redesign",
        "description": "Redesign the company website with modern UI and improved UX",
        "category": "work",
        "tags": ["design", "frontend", "ui/ux"],
        "status": "active",
        "priority": 2,
    },
    {
        "title": "Vacation Planning",
        "description": "Plan summer vacation to Europe including flights, accommodations, and activities",
        "category": "personal",
        "tags": ["travel", "planning", "budget"],
        "status": "active",
        "priority": 1,
    },
    {
        "title": "Learn Machine Learning",
        "description": "Study machine learning concepts and complete online course",
        "category": "personal",
        "tags": ["education", "ai", "programming"],
        "status": "active",
        "priority": 0,
    },
]

SAMPLE_NOTES = [
    "Need to schedule a meeting with the design team to discuss wireframes",
    "Check if travel insurance covers medical emergencies in all EU countries",
    "Found a great online course on Coursera for machine learning fundamentals",
]


def sample_tasks(now: datetime):
    return [
        {
            "title": "Create wireframes for homepage",
            "description": "Design wireframes for the new homepage layout",
            "status": "in_progress",
            "due_date": now + timedelta(days=3),
        },
        {
            "title": "Research flight options",
            "description": "Compare prices and schedules for flights to major European cities",
            "status": "pending",
            "due_date": now + timedelta(days=7),
        },
        {
            "title": "Complete first module of ML course",
            "description": "Watch videos and complete exercises for the introduction module",
            "status": "completed",
            "due_date": now - timedelta(days=2),
        },
    ]


def sample_conversations(now_s: int):
    def entry(conv_id, title, created_days, updated_days, question, answer):
        return {
            "id": conv_id,
            "title": title,
            "create_time": now_s - created_days * DAY,
            "update_time": now_s - updated_days * DAY,
            "mapping": {
                "message_1": {"id": "msg_1", "role": "user", "content": question},
                "message_2": {"id": "msg_2", "role": "assistant", "content": answer},
            },
        }

    return [
        entry(
            "conv_123", "Website Design Ideas", 7, 5,
            "I need ideas for a modern website design for a tech company.",
            "For a modern tech company website, consider these design elements:\n\n"
            "1. Minimalist design with ample white space\n2. Bold typography and vibrant accent colors\n"
            "3. Subtle animations and micro-interactions\n4. Dark mode option\n5. Card-based UI components",
        ),
        entry(
            "conv_456", "Europe Travel Planning", 14, 10,
            "I'm planning a trip to Europe this summer. What are some must-visit destinations?",
            "For a summer trip to Europe, here are some must-visit destinations:\n\n"
            "1. Paris, France\n2. Rome, Italy\n3. Barcelona, Spain\n4. Amsterdam, Netherlands\n5. Santorini, Greece",
        ),
    ]


class SampleDataService:
    """Seed a user's account with sample records, spread round-robin over the projects."""

    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway

    def load(self, user_id: str) -> dict:
        projects = [self.gateway.projects.create({"user_id": user_id, **data}) for data in SAMPLE_PROJECTS]

        def project_for(i):
            return projects[i % len(projects)].id

        tasks = [
            self.gateway.tasks.create({"user_id": user_id, "project_id": project_for(i), **data})
            for i, data in enumerate(sample_tasks(utcnow()))
        ]
        conversations = [
            self.gateway.conversations.create({
                "user_id": user_id,
                "project_id": project_for(i),
                "title": entry["title"],
                "content": entry,
                "conversation_id": entry["id"],
            })
            for i, entry in enumerate(sample_conversations(int(time.time())))
        ]
        notes = [
            self.gateway.notes.create({"user_id": user_id, "project_id": project_for(i), "content": content})
            for i, content in enumerate(SAMPLE_NOTES)
        ]

        logger.info("Loaded sample data for user %s", user_id)
        return {
            "projects": len(projects),
            "tasks": len(tasks),
            "conversations": len(conversations),
            "notes": len(notes),
        }
