"""Statement, career-bundle and profile rule tables for the insight generator.

Statement and career tables are read-only mappings of tuples keyed by
GlobalFactor. The personality profile rules at the end read primary
factors instead. The generator only looks entries up; it never branches
on factor names.
Anxiety entries describe the inverted condition (low anxiety is the
strength, high anxiety the development area).
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from pf16.utils.constants import GlobalFactor, PrimaryFactor, ProfileThresholds

Statements = Tuple[str, ...]
CareerBundle = Tuple[Tuple[str, str], ...]


# ============================================================================
# STRENGTHS
# ============================================================================

STRENGTH_STATEMENTS: Mapping[GlobalFactor, Statements] = MappingProxyType({
    GlobalFactor.EXTRAVERSION: (
        "Strong interpersonal skills and natural ability to build relationships",
        "Confident communicator who is comfortable in social and public settings",
        "Energized by teamwork and able to motivate others",
    ),
    GlobalFactor.ANXIETY: (
        "High emotional stability and composure under pressure",
        "Handles setbacks calmly and recovers quickly from stress",
        "Self-assured approach that inspires confidence in others",
    ),
    GlobalFactor.TOUGH_MINDEDNESS: (
        "Practical, objective decision-making focused on results",
        "Stays analytical and unswayed by emotional appeals",
    ),
    GlobalFactor.INDEPENDENCE: (
        "Natural leadership qualities and willingness to take charge",
        "Independent thinker who challenges assumptions and drives change",
        "Comfortable making decisions and taking initiative without direction",
    ),
    GlobalFactor.SELF_CONTROL: (
        "Highly disciplined, organized and reliable in meeting commitments",
        "Strong attention to detail and adherence to standards",
        "Plans carefully and follows through on long-term goals",
    ),
})

MODERATE_STRENGTH_STATEMENTS: Mapping[GlobalFactor, str] = MappingProxyType({
    GlobalFactor.EXTRAVERSION: "Good social skills and ability to work well with others",
    GlobalFactor.ANXIETY: "Generally maintains emotional balance in demanding situations",
    GlobalFactor.TOUGH_MINDEDNESS: "Balances practical judgment with openness to other views",
    GlobalFactor.INDEPENDENCE: "Shows initiative and can work with limited supervision",
    GlobalFactor.SELF_CONTROL: "Organized and dependable in day-to-day work",
})

GENERIC_STRENGTHS: Statements = (
    "Balanced personality profile with adaptability across different situations",
    "Flexible approach that can adjust to varied team and role requirements",
)


# ============================================================================
# DEVELOPMENT AREAS
# ============================================================================

DEVELOPMENT_STATEMENTS: Mapping[GlobalFactor, Statements] = MappingProxyType({
    GlobalFactor.EXTRAVERSION: (
        "Could benefit from developing networking and relationship-building skills",
        "May find it helpful to practice speaking up in group settings",
    ),
    GlobalFactor.ANXIETY: (
        "Would benefit from stress management techniques and resilience training",
        "May worry excessively about outcomes; mindfulness practices could help",
        "Building confidence in high-pressure situations is a development priority",
    ),
    GlobalFactor.TOUGH_MINDEDNESS: (
        "Could strengthen objective, data-driven decision-making",
        "May benefit from separating personal feelings from business decisions",
    ),
    GlobalFactor.INDEPENDENCE: (
        "Could develop assertiveness and confidence in leading others",
        "May benefit from taking more initiative on decisions and new ideas",
        "Practicing constructive disagreement would strengthen influence",
    ),
    GlobalFactor.SELF_CONTROL: (
        "Could improve planning, organization and time management",
        "May benefit from more consistent follow-through on routine tasks",
    ),
})

MODERATE_DEVELOPMENT_STATEMENTS: Mapping[GlobalFactor, str] = MappingProxyType({
    GlobalFactor.EXTRAVERSION: "Some room to grow in social confidence and visibility",
    GlobalFactor.ANXIETY: "Occasional tension under pressure; regular stress management routines would help",
    GlobalFactor.TOUGH_MINDEDNESS: "Could further develop a results-focused, pragmatic outlook",
    GlobalFactor.INDEPENDENCE: "Some room to grow in asserting own views and taking the lead",
    GlobalFactor.SELF_CONTROL: "Could benefit from more structure in planning and prioritization",
})

GENERIC_DEVELOPMENT_AREAS: Statements = (
    "Continue building on existing strengths through targeted professional development",
    "Seek regular feedback to identify specific areas for further growth",
)


# ============================================================================
# CAREER RECOMMENDATIONS
# ============================================================================

SALES_LEADERSHIP_BUNDLE: CareerBundle = (
    ("Sales Director/VP Sales", "Combines social confidence with independent drive to lead revenue teams"),
    ("Business Development Manager", "Builds relationships while pursuing new opportunities autonomously"),
    ("Entrepreneur/Startup Founder", "Self-directed leadership paired with the ability to rally people"),
    ("Management Consultant", "Persuasive communication and confidence in advising senior stakeholders"),
)

OPERATIONS_LEADERSHIP_BUNDLE: CareerBundle = (
    ("Operations Manager", "Organizes people and processes to deliver reliable results"),
    ("Project Manager", "Coordinates teams while keeping plans disciplined and on schedule"),
    ("Human Resources Manager", "Pairs interpersonal skill with consistent, fair process"),
)

STRATEGY_BUNDLE: CareerBundle = (
    ("Strategy Consultant", "Independent, objective analysis of complex business problems"),
    ("Product Manager", "Makes pragmatic trade-offs and drives decisions across teams"),
    ("Executive Leadership", "Decisive, results-focused direction setting"),
)

ANALYTICAL_BUNDLE: CareerBundle = (
    ("Financial Analyst", "Disciplined, objective handling of detailed quantitative work"),
    ("Quality Assurance Manager", "Enforces standards with precision and consistency"),
    ("Compliance Officer", "Applies rules rigorously and unswayed by pressure"),
)

CLIENT_FACING_BUNDLE: CareerBundle = (
    ("Account Manager", "Maintains strong client relationships over time"),
    ("Public Relations Specialist", "Communicates confidently with diverse audiences"),
    ("Training and Development Specialist", "Energizes and engages groups of learners"),
)

ENGINEERING_BUNDLE: CareerBundle = (
    ("Engineer", "Practical, objective problem solving"),
    ("Data Analyst", "Draws conclusions from evidence rather than impressions"),
    ("Operations Research Analyst", "Applies analytical methods to concrete decisions"),
)

INDEPENDENT_SPECIALIST_BUNDLE: CareerBundle = (
    ("Research Scientist", "Pursues independent lines of inquiry"),
    ("Independent Consultant", "Comfortable setting own direction and owning outcomes"),
    ("Business Analyst", "Challenges assumptions to improve how things are done"),
)

ADMINISTRATION_BUNDLE: CareerBundle = (
    ("Accountant", "Careful, rule-conscious handling of detail"),
    ("Administrative Manager", "Keeps operations organized and dependable"),
    ("Auditor", "Systematic review and adherence to standards"),
)

DEFAULT_CAREER_BUNDLE: CareerBundle = (
    ("Team Coordinator", "Balanced profile suited to supporting varied team needs"),
    ("Customer Success Specialist", "Adaptable approach to helping clients achieve their goals"),
    ("Administrative Specialist", "Versatile contributor across day-to-day operations"),
)

# Ordered (factors, bundle) rules. Entries with several factors match when all
# of them are among the top ranked factors; single-factor entries match when
# that factor ranks first. The first matching rule wins.
CAREER_RULES: Tuple[Tuple[Tuple[GlobalFactor, ...], CareerBundle], ...] = (
    ((GlobalFactor.EXTRAVERSION, GlobalFactor.INDEPENDENCE), SALES_LEADERSHIP_BUNDLE),
    ((GlobalFactor.EXTRAVERSION, GlobalFactor.SELF_CONTROL), OPERATIONS_LEADERSHIP_BUNDLE),
    ((GlobalFactor.INDEPENDENCE, GlobalFactor.TOUGH_MINDEDNESS), STRATEGY_BUNDLE),
    ((GlobalFactor.SELF_CONTROL, GlobalFactor.TOUGH_MINDEDNESS), ANALYTICAL_BUNDLE),
    ((GlobalFactor.EXTRAVERSION,), CLIENT_FACING_BUNDLE),
    ((GlobalFactor.TOUGH_MINDEDNESS,), ENGINEERING_BUNDLE),
    ((GlobalFactor.INDEPENDENCE,), INDEPENDENT_SPECIALIST_BUNDLE),
    ((GlobalFactor.SELF_CONTROL,), ADMINISTRATION_BUNDLE),
)


# ============================================================================
# PERSONALITY PROFILE
# ============================================================================

# Ordered (type, factors) rules; the first type whose factors are all high wins.
PERSONALITY_TYPE_RULES: Tuple[Tuple[str, Tuple[PrimaryFactor, ...]], ...] = (
    ("Natural Leader", (PrimaryFactor.E, PrimaryFactor.A)),
    ("Team Player", (PrimaryFactor.A, PrimaryFactor.C)),
    ("Innovator", (PrimaryFactor.Q1, PrimaryFactor.B)),
    ("Reliable Executor", (PrimaryFactor.C, PrimaryFactor.G)),
    ("Independent Contributor", (PrimaryFactor.Q2,)),
)
DEFAULT_PERSONALITY_TYPE = "Balanced Professional"

# Every high factor adds its style, in this order.
WORK_STYLE_RULES: Tuple[Tuple[PrimaryFactor, str], ...] = (
    (PrimaryFactor.A, "Collaborative"),
    (PrimaryFactor.E, "Leadership-oriented"),
    (PrimaryFactor.Q2, "Independent"),
    (PrimaryFactor.Q3, "Detail-oriented"),
    (PrimaryFactor.Q1, "Adaptable"),
    (PrimaryFactor.G, "Structured"),
)
DEFAULT_WORK_STYLE: Statements = ("Balanced approach",)

LEADERSHIP_FACTORS: Tuple[PrimaryFactor, ...] = (
    PrimaryFactor.E, PrimaryFactor.C, PrimaryFactor.A, PrimaryFactor.B,
)
HIGH_LEADERSHIP = "High Leadership Potential"
MODERATE_LEADERSHIP = "Moderate Leadership Potential"
INDIVIDUAL_CONTRIBUTOR = "Individual Contributor Strength"


# ============================================================================
# HIRING RECOMMENDATIONS
# ============================================================================

# (minimum overall score, hiring statements), highest tier first
HIRING_TIERS: Tuple[Tuple[int, Statements], ...] = (
    (ProfileThresholds.HIRE_STRONG, (
        "Highly recommended for hire",
        "Strong candidate with excellent potential",
    )),
    (ProfileThresholds.HIRE_WITH_SUPPORT, (
        "Recommended for hire with development support",
        "Good candidate with growth potential",
    )),
)
ENTRY_LEVEL_HIRING: Statements = (
    "Consider for entry-level positions with extensive training",
    "May require significant development investment",
)

LEADERSHIP_DEVELOPMENT = "Leadership development program"
LEADERSHIP_PLACEMENT = "Management track positions"
STANDARD_DEVELOPMENT: Statements = (
    "Regular performance reviews",
    "Continuous learning opportunities",
)


__all__ = [
    "STRENGTH_STATEMENTS",
    "MODERATE_STRENGTH_STATEMENTS",
    "GENERIC_STRENGTHS",
    "DEVELOPMENT_STATEMENTS",
    "MODERATE_DEVELOPMENT_STATEMENTS",
    "GENERIC_DEVELOPMENT_AREAS",
    "SALES_LEADERSHIP_BUNDLE",
    "DEFAULT_CAREER_BUNDLE",
    "CAREER_RULES",
    "PERSONALITY_TYPE_RULES",
    "DEFAULT_PERSONALITY_TYPE",
    "WORK_STYLE_RULES",
    "DEFAULT_WORK_STYLE",
    "LEADERSHIP_FACTORS",
    "HIGH_LEADERSHIP",
    "MODERATE_LEADERSHIP",
    "INDIVIDUAL_CONTRIBUTOR",
    "HIRING_TIERS",
    "ENTRY_LEVEL_HIRING",
    "LEADERSHIP_DEVELOPMENT",
    "LEADERSHIP_PLACEMENT",
    "STANDARD_DEVELOPMENT",
]
