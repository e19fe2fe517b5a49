"""Prompt templates. ``{{name}}`` placeholders are filled in by the template renderer."""

LYRA = """\
You are Lyra, a prompt optimization specialist. Your job is to turn any rough
request into a precise, well-structured prompt for an AI assistant.

Work in four steps:
1. **Deconstruct**: extract the core intent, key entities, constraints and the
   expected output.
2. **Diagnose**: find ambiguity, missing context and unclear success criteria.
3. **Develop**: pick techniques (role assignment, decomposition, examples,
   output format constraints) that fit the request.
4. **Deliver**: present the optimized prompt, followed by a short list of what
   changed and why.

Start by asking me which prompt I want to optimize and which assistant it is
meant for.
"""

GENERATE_PLAN = """\
Read the draft plan at `{{draftPlanPath}}`.

Turn it into a detailed implementation plan:
- Restate the goal and the acceptance criteria in concrete, testable terms.
- Explore the codebase to find every file, module and API the change touches.
- Break the work into small ordered steps. For each step list the files to
  change, the intended change, and how it will be verified.
- Call out risks, open questions and anything the draft leaves ambiguous.

Write the result next to the draft as a new markdown file and tell me its path.
Do not modify any source code.
"""

VALIDATE_PLAN = """\
Validate the implementation plan at `{{planPath}}`.

Stress-test it against the actual codebase:
- Check every referenced file, function and interface exists and behaves as the
  plan assumes.
- Look for missing steps, wrong ordering, untested edge cases and hidden
  coupling with other modules.
- Check that each step has a verification method.

Update `{{planPath}}` in place with your corrections and append a
"Validation notes" section summarizing what changed. Do not modify any source
code.
"""

EXECUTE_PLAN = """\
Execute the validated implementation plan at `{{planPath}}`.

Follow the steps in order. After each step, run the verification the plan
specifies and fix failures before moving on. If the plan turns out to be wrong,
stop and explain the problem instead of improvising a different design.

When all steps are done, summarize what was changed and how it was verified.
"""

DOCUMENT_CODEBASE = """\
Generate documentation for AI coding tools for the modules under
`{{startPath}}`.

For each module, library or package directly under `{{startPath}}`:
- Read its source and public interfaces.
- {{outputAction}} {{outputFiles}} {{fileOrFiles}} in that directory describing
  its purpose, structure, key entry points, conventions and how to test it.

Keep each file concise and factual; only document what the code actually does.
"""

DOCUMENT_DEEP = """\
Generate in-depth documentation for AI coding tools, recursively, for every
module, library or package under `{{startPath}}`.

Walk the directory tree depth first. In each directory that contains a
meaningful unit of code, {{outputAction}} {{outputFiles}} {{fileOrFiles}}
covering purpose, architecture, important types and functions, data flow,
conventions, and testing.

Skip directories where {{allRequiredFilesExist}}: {{skipExisting}}.
The required files are: {{requiredDocFiles}}.
"""

DOCUMENT_DIR = """\
Generate documentation for AI coding tools for the directory
`{{directoryPath}}`.

A packed snapshot of the directory is available at `{{repositoryXmlPath}}`.
Read it first; open individual files only when you need more detail.

{{outputAction}} {{outputFiles}} {{fileOrFiles}} inside `{{directoryPath}}`
describing its purpose, structure, key entry points, conventions, dependencies
and how to test it. Documentation was last generated at commit:
{{lastDocumentedCommit}}. If an existing {{outputFileList}} is present, update it
rather than starting over.
{{rules}}
"""

DOCUMENT_DIRS = """\
Generate documentation for AI coding tools for each of these directories:

{{directoryList}}

Packed snapshots, one per directory, are available at:

{{repositoryXmlPaths}}

For each directory, {{outputAction}} {{outputFiles}} {{fileOrFiles}} inside it
describing its purpose, structure, key entry points, conventions and how it
relates to the other directories listed above.
{{rules}}
"""

DOCUMENT_OVERVIEW = """\
Read `{{initialDocumentationPath}}` and explore the repository to produce a
high-level overview for AI coding tools.

{{outputAction}} {{outputFiles}} {{fileOrFiles}} at the project root covering:
what the project is, its tech stack, the top-level layout, how to build, run
and test it, and the conventions every contributor must follow.
"""

DOCUMENT_PROJECT = """\
Generate comprehensive codebase analysis and overview documentation for this
project.

Start from the existing documentation at `{{initialDocumentationPath}}`.
A packed snapshot of the whole repository is available at
`{{repositoryXmlPath}}`; read it before opening individual files.

{{outputAction}} {{outputFiles}} {{fileOrFiles}} at the project root covering:
- Overview and tech stack
- Architecture and module boundaries
- Build, run, test and lint commands that actually exist
- Code style and conventions
- Gotchas and non-obvious behaviour

Documentation was last generated at commit: {{lastDocumentedCommit}}.
{{rules}}
"""
