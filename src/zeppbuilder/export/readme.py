"""Setup instructions shipped with every exported project."""

README_PATH = "README.md"

README = """# Zepp OS AI App

Generated by ZeppBuilder AI.

## Project Structure

- `app.json`: Application configuration and permissions.
- `page/index.js`: Main application logic and UI layout.

## Setup Instructions

1. **Install Zepp OS CLI**: Ensure you have the Zeus CLI installed.
2. **Create Project**: Run `zeus create your-project-name` and select the "Empty" template.
3. **Copy Files**:
   - Replace the generated `app.json` with the one in this archive.
   - Replace `page/index.js` with the file in the `page/` folder of this archive.
4. **Permissions**:
   - If using Todoist, add your API token in `page/index.js`.
   - Voice features may need additional companion app setup.

## Build & Run

Run `zeus dev` to start the simulator.
"""


def generate_readme() -> str:
    return README
