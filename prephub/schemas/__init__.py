# __init__.py
from prephub.schemas.analysis import AggregateStats, GapResult, JDAnalyzeRequest, JDCommitRequest, JDScore, SkillDemand
from prephub.schemas.company import CompanyCreate, CompanyDetail, CompanyRead, DashboardResponse, JDCommitResponse, NotesUpdate, ProgressItem
from prephub.schemas.jobs import JobSearchResponse, ProxyHealth, QuickTagsResponse, TrackJobRequest
from prephub.schemas.skills import ResumeSkillsResponse, UserSkillsResponse, UserSkillsUpdate
from prephub.schemas.state import StateData, StateExport, StateImportResponse, StorageInfo

__all__ = [
	"AggregateStats",
	"GapResult",
	"JDAnalyzeRequest",
	"JDCommitRequest",
	"JDScore",
	"SkillDemand",
	"CompanyCreate",
	"CompanyDetail",
	"CompanyRead",
	"DashboardResponse",
	"JDCommitResponse",
	"NotesUpdate",
	"ProgressItem",
	"JobSearchResponse",
	"ProxyHealth",
	"QuickTagsResponse",
	"TrackJobRequest",
	"ResumeSkillsResponse",
	"UserSkillsResponse",
	"UserSkillsUpdate",
	"StateData",
	"StateExport",
	"StateImportResponse",
	"StorageInfo",
]
