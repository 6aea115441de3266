# Few-shot prompts for the two gating calls. Both expect a single short label back.

ROLE_CLASSIFIER_PROMPT = """\
You are a role classifier for an AI assistant.

Given a user query, classify the best suited agent role to handle it:
- customer_support
- sales_agent
- marketing_agent
- technical_expert
- general_info

Respond ONLY with the role.

Examples:
User: My order hasn't arrived.
Role: customer_support

User: What are your pricing plans?
Role: sales_agent

User: How do I use the API?
Role: technical_expert

User: Help me write a product launch announcement.
Role: marketing_agent

User: What's the capital of Japan?
Role: general_info

User: {input}
Role:"""

QUESTION_VALIDATION_PROMPT = """\
You are a question validation assistant.

Determine if the user's query is valid and has enough context to answer.

Respond with ONLY one of:
- valid
- needs_more_context

Examples:
User: tx blocked
Answer: needs_more_context

User: How do I reset my password?
Answer: valid

User: error?
Answer: needs_more_context

User: {input}
Answer:"""


def fill_prompt(template: str, query: str) -> str:
    return template.replace("{input}", query)
