#!/usr/bin/env python3
"""
client.py - Command-line chat client for the professor assistant
Usage: python client.py [--url URL]

Sends the whole conversation with every turn and prints the answer as it
streams back. The conversation only lives in this process.
"""

import argparse
import codecs
from enum import Enum
import requests
from config import CONFIG, log_message
from models import Message

GREETING = "Hey I am the AI Rate My Professor Bot, how may I help you?"


class TurnState(Enum):
    IDLE = "idle"
    SENDING = "sending"
    STREAMING = "streaming"
    COMPLETE = "complete"
    ERROR = "error"


def new_session():
    return [Message(role="assistant", content=GREETING)]


def begin_turn(session, text):
    """Returns (request payload, session with an empty assistant placeholder)"""
    user_message = Message(role="user", content=text)
    payload = [*session, user_message]
    return payload, [*payload, Message(role="assistant", content="")]


def append_fragment(session, fragment):
    """New session with the fragment added to the trailing assistant message"""
    if not session or session[-1].role != "assistant":
        raise ValueError("session must end with an assistant placeholder")

    last = session[-1]
    return [*session[:-1], last.model_copy(update={"content": (last.content or "") + fragment})]


class StreamConsumer:
    """Decodes a byte stream into the trailing assistant message of a session"""

    def __init__(self, session, on_fragment=None, encoding="utf-8"):
        self.session = session
        self.on_fragment = on_fragment
        self.decoder = codecs.getincrementaldecoder(encoding)()
        self.state = TurnState.SENDING
        self.error = None

    def _apply(self, text):
        if not text:
            return
        self.session = append_fragment(self.session, text)
        if self.on_fragment:
            self.on_fragment(text)

    def feed(self, data):
        self.state = TurnState.STREAMING
        # incomplete multi-byte sequences stay buffered in the decoder
        self._apply(self.decoder.decode(data))

    def finish(self):
        try:
            self._apply(self.decoder.decode(b"", final=True))
        except UnicodeDecodeError as e:
            self.fail(e)
            return
        self.state = TurnState.COMPLETE

    def fail(self, error):
        self.error = error
        self.state = TurnState.ERROR

    def consume(self, chunks):
        try:
            for chunk in chunks:
                if chunk:
                    self.feed(chunk)
        except (requests.exceptions.RequestException, UnicodeDecodeError) as e:
            self.fail(e)
            return self.session

        self.finish()
        return self.session


class ChatClient:
    def __init__(self, url=None, on_fragment=None, http=None):
        self.url = url or CONFIG["api_url"]
        self.on_fragment = on_fragment
        self.http = http or requests.Session()
        self.session = new_session()
        self.state = TurnState.IDLE
        self.last_outcome = None
        self.last_error = None

    def send_message(self, text):
        """Run one turn; returns COMPLETE or ERROR and leaves the client IDLE"""
        payload, self.session = begin_turn(self.session, text)
        self.state = TurnState.SENDING

        consumer = StreamConsumer(self.session, self.on_fragment)
        try:
            response = self.http.post(
                self.url,
                json=[message.model_dump() for message in payload],
                stream=True,
                timeout=60
            )
        except requests.exceptions.RequestException as e:
            consumer.fail(e)
        else:
            with response:
                if response.status_code != 200:
                    consumer.fail(self._error_detail(response))
                else:
                    self.state = TurnState.STREAMING
                    consumer.consume(response.iter_content(chunk_size=None))

        self.session = consumer.session
        self.last_outcome = consumer.state
        self.last_error = consumer.error
        if consumer.error is not None:
            log_message(f"Turn failed: {consumer.error}", "ERROR")

        self.state = TurnState.IDLE
        return self.last_outcome

    def _error_detail(self, response):
        try:
            return response.json().get("error", response.text)
        except ValueError:
            return f"HTTP {response.status_code}: {response.text}"


def main():
    """Interactive chat loop"""
    parser = argparse.ArgumentParser(description="Chat with the professor assistant")
    parser.add_argument('--url', type=str, default=CONFIG["api_url"],
                        help='Chat endpoint URL')
    args = parser.parse_args()

    client = ChatClient(args.url, on_fragment=lambda text: print(text, end="", flush=True))
    print(f"Bot: {GREETING}")

    while True:
        try:
            text = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not text:
            continue
        if text.lower() in ("quit", "exit"):
            break

        print("Bot: ", end="", flush=True)
        outcome = client.send_message(text)
        if outcome is TurnState.ERROR:
            print(f"\n[turn failed: {client.last_error}]")
        else:
            print()


if __name__ == "__main__":
    main()
