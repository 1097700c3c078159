# __init__.py
from prephub.models.company import Company
from prephub.models.user_skills import UserSkillSet

__all__ = [
	"Company",
	"UserSkillSet",
]
