"""Minimal demonstration of the chat gateway with the local provider."""

from chat_gateway.api.service import ChatGateway
from chat_gateway.config.settings import Settings

if __name__ == "__main__":
    gateway = ChatGateway(Settings(public_ai_service="local"))
    question = "Which of my tasks should I do first today?"
    result = gateway.handle_payload({
        "message": question,
        "history": [],
        "todos": [{"title": "write report"}, {"title": "reply to email"}],
        "plans": [{"title": "morning run"}],
    })
    print("User:", question)
    print("Assistant:", result.response)
