#!/usr/bin/env python3
"""
prompt_builder.py - Assemble the message sequence sent to the chat model

The newest user message is augmented with the retrieved professor reviews;
every earlier message is passed through untouched.
"""

from models import Message

SYSTEM_PROMPT = """You are a highly advanced academic assistant for the "Rate My Professor" platform. Your task is to help students find the most suitable professors based on their queries. When a student asks about a professor or subject, you will:

Understand the Query: Analyze the student's question to identify key topics, subjects, or attributes related to the professors they are looking for.

Use the Retrieved Information: Professor records matching the query are appended to the student's latest message. Base your recommendations on those records.

Provide Top Recommendations: Select and present the top 3 professors who best match the student's query. Include the following details for each professor:

Name: The name of the professor.
Subject: The primary subjects the professor teaches.
Rating: The overall rating or score given by students.
Review Summary: A brief summary of student reviews highlighting key strengths or weaknesses.

Maintain Accuracy and Relevance: Only recommend professors that appear in the retrieved records. If no records were found, say so and help the student refine the request.

Example User Query:
"Can you find me the top professors for data science?"

Example Response:
Dr. Alice Smith
Subject: Data Science, Machine Learning
Rating: 4.8/5
Review Summary: Dr. Smith is highly praised for her comprehensive understanding of data science and engaging teaching style.
"""

CONTEXT_HEADER = "\n\nReturned results from vector db:"

FALLBACK_CONTEXT = (
    "\n\nNo matching professors were found in the review database. "
    "Ask the student to clarify the subject, rating, or teaching style they are "
    "looking for, or offer general advice on choosing a professor."
)


def format_match(match):
    stars = "unrated" if match.stars is None else f"{match.stars:g}"
    return (
        f"\n\nProfessor: {match.id}"
        f"\nSubject: {match.subject}"
        f"\nStars: {stars}"
        f"\nReview: {match.review}"
    )


def format_context(matches):
    """Serialize matches in ranking order, or the fallback when there are none"""
    if not matches:
        return FALLBACK_CONTEXT
    return CONTEXT_HEADER + "".join(format_match(match) for match in matches)


def build_messages(history, matches, system_prompt=SYSTEM_PROMPT):
    """[system, *history[:-1], last user message + context]"""
    if not history:
        raise ValueError("history must contain the newest user message")

    *earlier, last = history
    return [
        Message(role="system", content=system_prompt),
        *earlier,
        Message(role="user", content=(last.content or "") + format_context(matches)),
    ]
