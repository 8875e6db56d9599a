"""Prompt templates for the LLM recommendation path."""

from contracts import ProjectRequirements

SYSTEM_PROMPT = (
    "You are a Tech Stack Advisor AI. Analyze project requirements and provide detailed "
    "technology recommendations in a structured JSON format. Focus on practical, modern "
    "solutions that match the team's experience level and budget constraints."
)

RESPONSE_SCHEMA = """{
  "frontend": {
    "primary": "recommended framework",
    "reasoning": "explanation for choice",
    "libraries": ["lib1", "lib2", "lib3"]
  },
  "backend": {
    "primary": "recommended backend technology",
    "database": "recommended database",
    "reasoning": "explanation for choices"
  },
  "devTools": {
    "versionControl": "Git",
    "deployment": "recommended platform",
    "cicd": "recommended CI/CD solution"
  },
  "estimatedCost": {
    "development": "cost range or 'Free (Self-developed)' if budget is Free",
    "hosting": "monthly hosting cost or 'Free (GitHub Pages, Netlify, Vercel, Railway free tier)' if budget is Free",
    "thirdParty": "monthly third-party costs or 'Free (Open source alternatives, free tiers of services)' if budget is Free"
  },
  "timeline": {
    "estimated": {
      "weeks": "number of weeks",
      "months": "number of months",
      "range": {
        "minimum": "minimum time estimate",
        "maximum": "maximum time estimate",
        "realistic": "realistic time estimate"
      }
    },
    "category": "Short-term/Medium-term/Long-term/Enterprise-scale",
    "description": "timeline description",
    "breakdown": {
      "planning": "weeks for planning",
      "development": "weeks for development",
      "testing": "weeks for testing",
      "deployment": "weeks for deployment"
    },
    "milestones": [
      {
        "name": "milestone name",
        "week": "week number",
        "description": "milestone description"
      }
    ],
    "riskFactors": ["risk1", "risk2"],
    "recommendations": ["recommendation1", "recommendation2"]
  },
  "roadmap": [
    {
      "phase": "Phase name",
      "duration": "time estimate",
      "tasks": ["task1", "task2"],
      "deliverables": ["deliverable1", "deliverable2"]
    }
  ],
  "githubTemplates": [
    {
      "name": "template name",
      "description": "template description",
      "url": "github url"
    }
  ],
  "integrationWarnings": [
    {
      "tools": ["tool1", "tool2"],
      "issue": "potential issue",
      "solution": "recommended solution"
    }
  ],
  "communityInsights": {
    "popularity": "High/Medium/Low",
    "marketDemand": "Growing/Stable/Declining",
    "trendingAlternatives": ["alt1", "alt2"]
  }
}"""


def build_prompt(req: ProjectRequirements) -> str:
    """Render the user message for one set of requirements."""
    features = ", ".join(req.features) or "None specified"
    return f"""
Analyze this project and provide comprehensive technology recommendations:

Project Details:
- Name: {req.project_name}
- Development Type: {req.development_type}
- Description: {req.description}
- Budget: {req.budget} ({req.currency.value})
- Timeline: {req.timeline}
- Team Size: {req.team_size}
- Experience Level: {req.experience}
- Required Features: {features}

Please provide recommendations in this exact JSON structure:
{RESPONSE_SCHEMA}"""
