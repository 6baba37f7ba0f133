"""
Simulation of an AI Agent using hostshell.

This demonstrates how the host tools behave in an agent loop.
The agent (simulated here) picks tools dynamically. hostshell keeps every
command and file operation inside the workspace and always answers in text.
"""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from hostshell import create_toolkit


@dataclass
class AgentAction:
    thought: str
    tool: str
    arguments: dict = field(default_factory=dict)


class MockLLM:
    """Simulates an LLM acting on a user request."""

    def __init__(self):
        self.step = 0

    def next_action(self) -> AgentAction | None:
        """Returns the next tool call the 'AI' wants to make."""
        actions = [
            AgentAction(
                thought="I'll create a python script.",
                tool="write_file",
                arguments={"path": "hello.py", "content": 'print("Hello World")\n'},
            ),
            AgentAction(
                thought="Let me run the script.",
                tool="run_command",
                arguments={"command": "python3 hello.py"},
            ),
            AgentAction(
                thought="I'll make it friendlier.",
                tool="edit_file",
                arguments={"path": "hello.py", "content": 'print("Hello, agent!")\n'},
            ),
            AgentAction(
                thought="Which Python files are here?",
                tool="list_files",
                arguments={"pattern": "*.py"},
            ),
            # MISTAKE: the agent wanders outside its workspace
            AgentAction(
                thought="I should read the system password file.",
                tool="read_file",
                arguments={"path": "../../etc/passwd"},
            ),
            # MISTAKE: a command that never finishes
            AgentAction(
                thought="Let me wait for the server to come up.",
                tool="run_command",
                arguments={"command": "sleep 60", "timeout": 500},
            ),
        ]

        if self.step < len(actions):
            action = actions[self.step]
            self.step += 1
            return action
        return None


async def main():
    print("🤖 Agent initializing...")
    workspace = Path("./workspace")
    workspace.mkdir(parents=True, exist_ok=True)

    llm = MockLLM()

    async with create_toolkit(workspace) as toolkit:
        print(f"🔒 Tools confined to {toolkit.config.root}\n")

        while True:
            action = llm.next_action()
            if not action:
                print("✅ Agent finished task.")
                break

            print(f"🤖 Thought: {action.thought}")
            print(f"  [Tool] {action.tool}({action.arguments})")

            output = await getattr(toolkit, action.tool)(**action.arguments)

            first_line = output.strip().splitlines()[0] if output.strip() else "(empty)"
            if "Access denied" in output or "timed out" in output:
                print(f"🛡️ HOSTSHELL STOPPED IT: {first_line}")
            else:
                print(f"  -> Result: {first_line}")
            print("-" * 50)


if __name__ == "__main__":
    asyncio.run(main())
