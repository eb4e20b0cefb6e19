"""Static SEO metadata per route and the fallback chains for content-backed pages."""

from typing import Dict, NamedTuple

from consultsite.models.content import BlogPost, CaseStudy, Service
from consultsite.models.seo import SEO, OpenGraph, TwitterCard

SITE_NAME = "The Digital Janitor"

# Case-study challenges are cut to the usual meta description length
_DESCRIPTION_LENGTH = 160

_TAGLINE = "Digital Transformation Orchestrator with 15+ years of cross-functional expertise"

LAYOUT_SEO = SEO(
    title="Technical Consulting Excellence | Digital Transformation Orchestrator",
    description=(
        "15+ years of cross-functional technical expertise helping businesses navigate digital "
        "transformation, AI implementation, and strategic technology decisions."
    ),
    keywords=[
        "technical consulting",
        "digital transformation",
        "AI implementation",
        "fractional CTO",
        "technology strategy",
    ],
    open_graph=OpenGraph(title="Technical Consulting Excellence", description=_TAGLINE),
    twitter=TwitterCard(title="Technical Consulting Excellence", description=_TAGLINE),
)

HOME_SEO = SEO(
    title=f"Jason Anton | {SITE_NAME}",
    description=(
        "Digital Janitor with 15+ years of cross-functional expertise helping businesses "
        "navigate complex technical challenges."
    ),
    keywords=["technical consulting", "digital transformation", "AI implementation", "fractional CTO"],
)

ABOUT_SEO = SEO(
    title=f"About Jason Anton | {SITE_NAME}",
    description=(
        "From high school dropout to pioneering AI systems at CMS. Meet Jason Anton - The Digital "
        "Janitor who cleans up digital messes and builds solutions that work."
    ),
    keywords=[
        "Jason Anton",
        "Digital Janitor",
        "technical consultant",
        "CMS modernization",
        "AI implementation",
        "software developer",
    ],
)

SERVICES_SEO = SEO(
    title=f"Consulting Services | {SITE_NAME}",
    description=(
        "Expert technology consulting services: Digital transformation, AI/ML implementation, "
        "Fractional CTO services, and technical due diligence."
    ),
    keywords=[
        "consulting services",
        "digital transformation",
        "AI implementation",
        "fractional CTO",
        "technical due diligence",
    ],
)

CASE_STUDIES_SEO = SEO(
    title=f"Case Studies | {SITE_NAME}",
    description=(
        "Real-world technical solutions and measurable business impact. From enterprise "
        "modernization to AI implementation, see how complex digital challenges become success stories."
    ),
    keywords=[
        "case studies",
        "technical solutions",
        "enterprise modernization",
        "digital transformation",
        "software development",
        "system integration",
    ],
)

INSIGHTS_SEO = SEO(
    title=f"Insights | {SITE_NAME}",
    description=(
        "Thought leadership on digital transformation, AI implementation, and solving complex "
        "technical challenges. Real insights from 15+ years in the trenches."
    ),
    keywords=[
        "insights",
        "digital transformation",
        "AI implementation",
        "technical leadership",
        "software development",
        "federal technology",
        "thought leadership",
    ],
)

ROI_CALCULATOR_SEO = SEO(
    title="ROI Calculator | Measure Your Technology Investment Returns",
    description=(
        "Calculate the return on investment for technology consulting services. Interactive ROI "
        "calculators for digital transformation, AI implementation, and more."
    ),
    keywords=[
        "ROI calculator",
        "technology consulting ROI",
        "digital transformation ROI",
        "AI implementation ROI",
    ],
)


class CalculatorPage(NamedTuple):
    title: str
    seo: SEO


ROI_CALCULATORS: Dict[str, CalculatorPage] = {
    "digital-transformation": CalculatorPage(
        "Digital Transformation",
        SEO(
            title=f"Digital Transformation ROI Calculator | {SITE_NAME}",
            description=(
                "Calculate the return on investment for your digital transformation project. "
                "Interactive calculator with real project data and transparent methodology."
            ),
            keywords=[
                "digital transformation ROI",
                "technology modernization calculator",
                "digital strategy ROI",
            ],
        ),
    ),
    "ai-ml-implementation": CalculatorPage(
        "AI/ML Implementation",
        SEO(
            title=f"AI/ML Implementation ROI Calculator | {SITE_NAME}",
            description=(
                "Calculate ROI for AI and machine learning projects. Interactive calculator with "
                "real implementation data and transparent methodology."
            ),
            keywords=[
                "AI ROI calculator",
                "machine learning ROI",
                "artificial intelligence investment calculator",
            ],
        ),
    ),
    "fractional-cto": CalculatorPage(
        "Fractional CTO",
        SEO(
            title=f"Fractional CTO ROI Calculator | {SITE_NAME}",
            description=(
                "Calculate ROI for fractional CTO services vs full-time hire. Compare costs and "
                "measure strategic technology leadership value."
            ),
            keywords=["fractional CTO ROI", "part-time CTO calculator", "technology leadership ROI"],
        ),
    ),
    "technical-due-diligence": CalculatorPage(
        "Technical Due Diligence",
        SEO(
            title=f"Technical Due Diligence ROI Calculator | {SITE_NAME}",
            description=(
                "Calculate ROI for technical due diligence in M&A and investments. Measure value "
                "protection and risk mitigation from comprehensive technology assessment."
            ),
            keywords=[
                "technical due diligence ROI",
                "M&A technology assessment",
                "investment due diligence calculator",
            ],
        ),
    ),
    "public-speaking": CalculatorPage(
        "Public Speaking & Keynotes",
        SEO(
            title=f"Public Speaking & Keynotes ROI Calculator | {SITE_NAME}",
            description=(
                "Calculate ROI for keynote speaking and team motivation. Measure the impact of "
                "expert presentations on productivity and engagement."
            ),
            keywords=["keynote speaker ROI", "speaking engagement calculator", "team motivation ROI"],
        ),
    ),
    "technical-content-creation": CalculatorPage(
        "Technical Content Creation",
        SEO(
            title=f"Technical Content Creation ROI Calculator | {SITE_NAME}",
            description=(
                "Calculate ROI for professional technical documentation and content creation. "
                "Measure productivity gains and cost savings from quality technical writing."
            ),
            keywords=["technical writing ROI", "documentation ROI", "technical content calculator"],
        ),
    ),
}


def service_seo(service: Service) -> SEO:
    return SEO(
        title=service.seo_title or f"{service.title} | {SITE_NAME}",
        description=service.seo_description or service.short_description,
        keywords=service.seo_keywords,
    )


def case_study_seo(case_study: CaseStudy) -> SEO:
    return SEO(
        title=case_study.seo_title or f"{case_study.title} | Case Study",
        description=case_study.seo_description
        or case_study.challenge[:_DESCRIPTION_LENGTH],
        keywords=case_study.seo_keywords,
    )


def blog_post_seo(post: BlogPost) -> SEO:
    image = post.featured_image.url if post.featured_image else None
    title = post.seo_title or f"{post.title} | Insights"
    description = post.seo_description or post.excerpt
    return SEO(
        title=title,
        description=description,
        keywords=post.seo_keywords,
        open_graph=OpenGraph(title=title, description=description, type="article", image=image),
    )
