import asyncio
import os
import sys
from pathlib import Path

# Ensure src is in pythonpath
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from dotenv import load_dotenv
load_dotenv()

from bothn_server.api.dependencies import get_abbreviation_expander, get_assistant_state
from bothn_server.core.errors import DocumentSourceError
from bothn_server.engine.router import EndSession, Reply, ResponseRouter
from bothn_server.sources.files import extract_document_text
from bothn_server.sources.web import WebPageFetcher

USAGE = "Usage: chat_console.py [FILE.txt|FILE.docx|FILE.xlsx|URL]"


async def load_document(source: str) -> str:
    if source.startswith(("http://", "https://")):
        print(f"Fetching {source} ...")
        return await WebPageFetcher().fetch_text(source)

    path = Path(source)
    print(f"Reading {path} ...")
    return extract_document_text(path.name, path.read_bytes())


async def main():
    if len(sys.argv) > 2:
        print(USAGE)
        return

    state = get_assistant_state()
    router = ResponseRouter(state, preprocessors=[get_abbreviation_expander()])
    print(f"Loaded {len(state.knowledge_base)} Q&A pairs and {len(state.intents)} intents.")

    # 1. Optional document to question
    if len(sys.argv) == 2:
        try:
            text = await load_document(sys.argv[1])
        except (DocumentSourceError, OSError) as e:
            print(f"Could not load document: {e}")
            return
        context = state.analyze_document(text)
        print(f"Document ready: {len(context.corpus)} sentences.")

    # 2. Chat loop
    print("Type a message (Ctrl-D to quit).")
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            break

        result = router.route(line.strip())
        if isinstance(result, Reply):
            print(result.text)
        elif isinstance(result, EndSession):
            print("[Phiên hỏi đáp đã kết thúc]")

if __name__ == "__main__":
    asyncio.run(main())
