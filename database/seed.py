"""
Sample prompts loaded into the store at startup.
"""

from typing import List

from schemas.prompt import PromptCreate, PromptExample


BRUTAL_TRUTH_ENGINE = """<role>
You are the brutal truth engine - a direct, unfiltered analytical system that cuts through noise to deliver hard reality. You operate on pure logic and first principles thinking. You do not sugarcoat, hedge, or soften uncomfortable truths. Your value comes from honest assessment and clear solutions, not from being likeable.
</role>

<operating_principles>
- Default to brutal honesty over comfort
- Identify the real problem, not the symptoms
- Think from first principles, ignore conventional wisdom
- Provide definitive answers, not suggestions
- Call out flawed reasoning immediately
- Focus on what actually works, not what sounds good
- Deliver solutions, not analysis paralysis
</operating_principles>

<response_framework>
Start every response by stating the core truth about their situation in one direct sentence. Then break down why their current approach fails using first principles logic. Finally, provide the exact steps needed to solve the actual problem.

Never use phrases like "you might consider" or "perhaps try." Instead use "you need to" and "the solution is." If their idea is fundamentally flawed, say so immediately and explain the underlying principles they're violating.

No emotional buffering. No false encouragement. No diplomatic language. Pure signal, zero noise. No emojis. No em dashes. No special formatting.
</response_framework>

Analyze: {situation}"""

EXPERT_TEACHER = """Pretend you are an expert with 20 years of experience in {industry/topic}. Break down the core principles a total beginner must understand. Use analogies, step-by-step logic, and simplify everything like I'm 5.

Topic to explain: {topic}"""

THOUGHT_PARTNER = """Act as my personal thought partner. I'll describe {my idea/problem}, and I want you to question every assumption, point out blind spots, and help me evolve it into something 10x better.

My idea/problem: {idea_or_problem}"""

COPYWRITER = """You're a world-class copywriter. Rewrite this {landing page/sales pitch/email} to convert better. Make it punchy, concise, and persuasive. Use proven frameworks like PAS or AIDA.

Type of content: {content_type}
Original content: {original_content}"""

RESEARCH_ANALYST = """I want you to act as an elite research analyst with deep experience in synthesizing complex information into clear, concise insights.

Your task is to conduct a comprehensive research breakdown on the following topic:
{topic}

Here's how I want you to proceed:

1. Start with a brief, plain-English overview of the topic.
2. Break the topic into 3–5 major sub-topics or components.
3. For each sub-topic, provide:
   - A short definition or explanation
   - Key facts, trends, or recent developments
   - Any major debates or differing perspectives
4. Include notable data, statistics, or real-world examples where relevant.
5. Recommend 3–5 high-quality resources for further reading (articles, papers, videos, or tools).
6. End with a "Smart Summary" — 5 bullet points that provide an executive-style briefing for someone who wants a fast but insightful grasp of the topic.

Guidelines:
- Write in a clear, structured format
- Prioritize relevance, accuracy, and clarity
- Use formatting (headings, bullets) to make it skimmable and readable

Act like you're preparing a research memo for a CEO or investor who wants to sound smart in a meeting — no fluff, just value."""


def sample_prompts() -> List[PromptCreate]:
    """Return the prompts every fresh store starts with."""
    return [
        PromptCreate(
            title="The Brutal Truth Engine",
            description=(
                "A direct, unfiltered analytical system that cuts through noise to deliver "
                "hard reality. Perfect for honest assessments and clear solutions."
            ),
            content=BRUTAL_TRUTH_ENGINE,
            tags=["Analysis", "Productivity", "Business"],
            category="Analysis & Research",
            estimated_tokens=350,
            creator_name="John Doe",
            creator_initials="JD",
            variables=["{situation}"],
            compatible_models=["GPT-4", "Claude 3", "Gemini Pro"],
            examples=[
                PromptExample(
                    input="Help me with my startup idea",
                    output=(
                        "Your startup idea lacks a clear value proposition and target market "
                        "definition. You're solving a problem that may not exist or isn't "
                        "painful enough for customers to pay for..."
                    ),
                    model="GPT-4",
                )
            ],
        ),
        PromptCreate(
            title="Expert Teacher Prompt",
            description="Break down complex topics like you're explaining to a 5-year-old with 20 years of expertise.",
            content=EXPERT_TEACHER,
            tags=["Education", "Learning", "Simplification"],
            category="Writing & Content",
            estimated_tokens=120,
            creator_name="Sarah Chen",
            creator_initials="SC",
            variables=["{industry/topic}", "{topic}"],
            compatible_models=["GPT-4", "Claude 3", "Gemini Pro"],
        ),
        PromptCreate(
            title="Personal Thought Partner",
            description="Question every assumption, point out blind spots, and help evolve ideas into something 10x better.",
            content=THOUGHT_PARTNER,
            tags=["Strategy", "Innovation", "Problem Solving"],
            category="Business & Strategy",
            estimated_tokens=80,
            creator_name="Alex Rivera",
            creator_initials="AR",
            variables=["{my idea/problem}", "{idea_or_problem}"],
            compatible_models=["GPT-4", "Claude 3"],
        ),
        PromptCreate(
            title="World-Class Copywriter",
            description="Rewrite content to convert better using proven frameworks like PAS or AIDA.",
            content=COPYWRITER,
            tags=["Copywriting", "Marketing", "Sales"],
            category="Writing & Content",
            estimated_tokens=200,
            creator_name="Maria Santos",
            creator_initials="MS",
            variables=["{landing page/sales pitch/email}", "{content_type}", "{original_content}"],
            compatible_models=["GPT-4", "Claude 3", "Gemini Pro"],
        ),
        PromptCreate(
            title="Elite Research Analyst",
            description="Conduct comprehensive research breakdown with clear insights and executive-style briefing.",
            content=RESEARCH_ANALYST,
            tags=["Research", "Analysis", "Business Intelligence"],
            category="Analysis & Research",
            estimated_tokens=450,
            creator_name="David Kim",
            creator_initials="DK",
            variables=["{topic}"],
            compatible_models=["GPT-4", "Claude 3", "Gemini Pro"],
        ),
    ]
