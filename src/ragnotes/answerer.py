# src/ragnotes/answerer.py
"""Question answering grounded on the user's own notes."""

import logging

from ragnotes.exceptions import EmbeddingError, GenerationError
from ragnotes.generator import TextGenerator
from ragnotes.models import AnswerResponse, ContextChunk
from ragnotes.retriever import Retriever

logger = logging.getLogger(__name__)

NO_RELEVANT_INFORMATION = (
    "I couldn't find any relevant information in your notes to answer that question."
)
ANSWER_ERROR_MESSAGE = (
    "Sorry, I encountered an error trying to answer your question based on your notes."
)

CONTEXT_SEPARATOR = "\n\n---\n\n"

SYNTHESIS_PROMPT = """You are a helpful assistant answering questions about the user's personal notes.
Answer the question using ONLY the context below, which was taken from the user's notes.
Do not use any outside knowledge.
If the context does not contain enough information to answer, say that the notes don't cover it.

Context:
{context}

Question: {query}

Answer:"""


class AnswerSynthesizer:
    """Answers a question from the caller's top retrieved chunks."""

    def __init__(
        self,
        retriever: Retriever,
        generator: TextGenerator,
        prompt_template: str | None = None,
        temperature: float | None = 0.3,
        k: int = 5,
    ) -> None:
        """Initialize the answer synthesizer.

        Args:
            retriever: Owner-scoped retriever
            generator: Text generator for the answer
            prompt_template: Custom prompt with {context} and {query}
            temperature: Generation temperature. None to use model default.
            k: Number of chunks used as context
        """
        self.retriever = retriever
        self.generator = generator
        self.prompt_template = prompt_template or SYNTHESIS_PROMPT
        self.temperature = temperature
        self.k = k

    async def ask(self, query: str, owner_id: str) -> AnswerResponse:
        """Answer a question and report the chunks used as sources."""
        try:
            hits = await self.retriever.retrieve_chunks(query, owner_id, k=self.k)
        except EmbeddingError:
            logger.error("Could not embed question for owner %s", owner_id, exc_info=True)
            return AnswerResponse(query=query, answer=ANSWER_ERROR_MESSAGE)

        sources = [
            ContextChunk(
                chunk_id=chunk.id,
                document_id=chunk.document_id,
                text=chunk.text,
                score=hit.score,
            )
            for hit, chunk in hits
        ]

        if not sources:
            return AnswerResponse(query=query, answer=NO_RELEVANT_INFORMATION)

        prompt = self.build_prompt(query, sources)
        try:
            answer = await self.generator.generate(prompt, temperature=self.temperature)
        except GenerationError:
            logger.error("Answer generation failed for owner %s", owner_id, exc_info=True)
            return AnswerResponse(query=query, answer=ANSWER_ERROR_MESSAGE, sources=sources)

        return AnswerResponse(query=query, answer=answer.strip(), sources=sources)

    async def answer(self, query: str, owner_id: str) -> str:
        """Answer a question, returning only the answer text."""
        response = await self.ask(query, owner_id)
        return response.answer

    def build_prompt(self, query: str, sources: list[ContextChunk]) -> str:
        """Build the grounded prompt, most relevant context first."""
        context = CONTEXT_SEPARATOR.join(source.text for source in sources)
        return self.prompt_template.format(context=context, query=query)
