"""Keyword rule table for the offline assistant.

Each rule pairs a predicate over case-folded text with a canned answer.
Rules are evaluated in table order and the first match wins, so specific
rules sit above the broader ones that would otherwise shadow them.
"""

from collections.abc import Callable
from dataclasses import dataclass

Predicate = Callable[[str], bool]


def contains(*keywords: str) -> Predicate:
    """Match when any keyword is a substring of the text."""
    needles = tuple(keyword.casefold() for keyword in keywords)

    def predicate(text: str) -> bool:
        return any(needle in text for needle in needles)

    return predicate


def all_of(*predicates: Predicate) -> Predicate:
    """Match when every predicate matches."""

    def predicate(text: str) -> bool:
        return all(p(text) for p in predicates)

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    """Match when at least one predicate matches."""

    def predicate(text: str) -> bool:
        return any(p(text) for p in predicates)

    return predicate


def always(text: str) -> bool:
    return True


@dataclass(frozen=True)
class Rule:
    """A keyword predicate bound to a canned answer."""

    name: str
    predicate: Predicate
    response: str

    def matches(self, text: str) -> bool:
        """Evaluate the predicate on already case-folded text."""
        return self.predicate(text)


LEGACY_CONVERSION = Rule(
    name="legacy_conversion",
    predicate=any_of(
        all_of(contains("cobol"), contains("python")),
        all_of(contains("convert"), contains("cobol", "fortran", "legacy")),
    ),
    response=(
        "To **convert COBOL to Python** (or any legacy language):\n\n"
        "**Step-by-Step Process:**\n"
        '1. Click "Code Language Converter" from the main page\n'
        "2. **Select Source Language**: Choose COBOL from the Legacy category\n"
        "3. **Select Target Language**: Choose Python from the Modern category\n"
        '4. **Configure Options**: Enable "Preserve Comments", "Generate Documentation", "Optimize Code"\n'
        "5. **Upload Files**: Drop your .cob or .cbl COBOL files\n"
        "6. **AI Analysis**: GPT-4 analyzes your COBOL code structure\n"
        "7. **Generate Workflow**: View the conversion workflow and flow chart\n"
        "8. **Get Results**: Download converted Python code with tests and documentation\n\n"
        "**What You Get:**\n"
        "• Clean, modern Python code\n"
        "• Comprehensive documentation\n"
        "• Unit tests\n"
        "• Migration notes and warnings\n\n"
        "The AI understands COBOL business logic and converts it to Pythonic patterns!"
    ),
)

CODE_CONVERSION = Rule(
    name="code_conversion",
    predicate=all_of(contains("code"), contains("convert", "migration", "language")),
    response=(
        "The **Code Language Converter** helps you convert legacy code to modern languages:\n\n"
        "1. Select your source language (like COBOL, Fortran) and target language (like Python, Java)\n"
        "2. Configure conversion options (preserve comments, generate docs, etc.)\n"
        "3. Upload your code files\n"
        "4. AI analyzes your code and generates a workflow\n"
        "5. Get converted code with documentation and tests\n\n"
        'Click on "Code Language Converter" from the main page to get started!'
    ),
)

DATABASE_CONVERSION = Rule(
    name="database_conversion",
    predicate=contains("database", "sql", "schema"),
    response=(
        "The **Database Schema & Query Converter** helps migrate between database systems:\n\n"
        "1. Select source database (Oracle, SQL Server) and target (PostgreSQL, MySQL)\n"
        "2. Configure conversion options (preserve constraints, generate indexes)\n"
        "3. Upload SQL files, schemas, or queries\n"
        "4. AI analyzes your database structure\n"
        "5. Get converted schemas and optimized queries\n\n"
        "Perfect for migrating from legacy databases to modern cloud databases!"
    ),
)

DOCUMENTATION = Rule(
    name="documentation",
    predicate=contains("documentation", "docs", "readme"),
    response=(
        "The **Code Documentation Generator** creates comprehensive documentation:\n\n"
        "1. Select documentation type (README, API docs, user guide)\n"
        "2. Configure options (include examples, diagrams, API reference)\n"
        "3. Upload your code files or entire project\n"
        "4. AI analyzes code structure and components\n"
        "5. Get professional documentation ready for use\n\n"
        "Great for creating missing documentation for existing projects!"
    ),
)

CODE_QUALITY = Rule(
    name="code_quality",
    predicate=contains("quality", "analysis", "metrics"),
    response=(
        "The **Code Quality Analysis** provides detailed code assessment:\n\n"
        "1. Configure analysis options (performance, security, maintainability)\n"
        "2. Upload code files or entire codebase\n"
        "3. AI analyzes code quality with detailed metrics\n"
        "4. Get quality score, issues, and improvement suggestions\n\n"
        "Helps identify technical debt and improvement opportunities!"
    ),
)

BUSINESS_LOGIC = Rule(
    name="business_logic",
    predicate=contains("business logic", "extract", "generate project"),
    response=(
        "The **Business Logic Extractor & Project Generator** is our most powerful feature:\n\n"
        "1. Upload your complete existing project\n"
        "2. AI extracts core business logic and rules\n"
        "3. Edit and refine the extracted business logic\n"
        "4. Select target framework (React, Vue, Angular, etc.)\n"
        "5. Configure generation options (database, API, tests)\n"
        "6. AI generates a complete new application\n\n"
        "Perfect for modernizing legacy systems or rebuilding applications in new technologies!"
    ),
)

PROJECT_MIGRATION = Rule(
    name="project_migration",
    predicate=all_of(contains("project"), contains("migration")),
    response=(
        "The **Full Project Migration** will help migrate entire projects:\n\n"
        "1. Select source framework (.NET Framework, Java 8)\n"
        "2. Choose target framework (.NET Core, Java 21)\n"
        "3. Upload complete project\n"
        "4. AI analyzes architecture and dependencies\n"
        "5. Get migrated project with modern patterns\n\n"
        "This feature is currently under development!"
    ),
)

GETTING_STARTED = Rule(
    name="getting_started",
    predicate=contains("start", "begin", "how to use"),
    response=(
        "Welcome to the Code Migration Platform! Here's how to get started:\n\n"
        "**First Time Setup:**\n"
        "1. Configure Azure OpenAI credentials (see the configuration guide at the top)\n"
        "2. Choose a migration tool from the main page\n\n"
        "**Most Popular Features:**\n"
        "• **Code Language Converter** - Convert legacy code to modern languages\n"
        "• **Business Logic Extractor** - Extract logic and generate new applications\n"
        "• **Database Migration** - Convert between database systems\n"
        "• **Documentation Generator** - Create comprehensive docs\n\n"
        "Each tool has a step-by-step wizard to guide you through the process!"
    ),
)

CONFIGURATION = Rule(
    name="configuration",
    predicate=contains("config", "setup", "azure"),
    response=(
        "To configure Azure OpenAI:\n\n"
        "1. **Create Azure OpenAI Resource** in Azure Portal\n"
        "2. **Deploy GPT-4 Model** in Azure OpenAI Studio\n"
        "3. **Get API Credentials** from Keys and Endpoint section\n"
        "4. **Create .env file** with:\n"
        "   - AZURE_OPENAI_ENDPOINT\n"
        "   - AZURE_OPENAI_API_KEY\n"
        "   - AZURE_OPENAI_DEPLOYMENT_NAME\n"
        "   - AZURE_OPENAI_API_VERSION\n\n"
        "See the configuration guide at the top of the page for detailed instructions!"
    ),
)

FILE_UPLOAD = Rule(
    name="file_upload",
    predicate=contains("upload", "file", "folder"),
    response=(
        "File Upload Tips:\n\n"
        "**Supported Methods:**\n"
        "• Drag & drop files or folders\n"
        '• Click "Select Files" for individual files\n'
        '• Click "Select Folder" for entire projects\n\n'
        "**Supported File Types:**\n"
        "• Code files (.js, .py, .java, .cs, .cpp, etc.)\n"
        "• Database files (.sql, .ddl, .psql)\n"
        "• Config files (.json, .xml, .yaml)\n"
        "• Documentation (.md, .txt)\n\n"
        "**Best Practices:**\n"
        "• Upload complete project folders for best results\n"
        "• Include configuration and documentation files\n"
        "• Larger projects are processed in chunks automatically"
    ),
)

FEATURES = Rule(
    name="features",
    predicate=contains("features", "what can", "capabilities"),
    response=(
        "Platform Capabilities:\n\n"
        "🔄 **Code Language Converter**\n"
        "• Convert 30+ languages (COBOL→Java, Fortran→Python)\n"
        "• AI-powered analysis and optimization\n\n"
        "🗄️ **Database Migration**\n"
        "• Convert between 15+ database systems\n"
        "• Schema and query optimization\n\n"
        "📚 **Documentation Generator**\n"
        "• Auto-generate README, API docs, user guides\n"
        "• Multiple documentation formats\n\n"
        "📊 **Code Quality Analysis**\n"
        "• Comprehensive quality metrics\n"
        "• Security and performance analysis\n\n"
        "🧠 **Business Logic Extractor**\n"
        "• Extract logic from any codebase\n"
        "• Generate complete new applications\n\n"
        "All powered by Azure OpenAI GPT-4!"
    ),
)

HELP = Rule(
    name="help",
    predicate=contains("help", "?"),
    response=(
        "I'm here to help! You can ask me about:\n\n"
        "• How to use any specific feature\n"
        "• Getting started with the platform\n"
        "• File upload and configuration\n"
        "• Troubleshooting issues\n"
        "• Platform capabilities\n\n"
        "Just type your question and I'll provide detailed guidance!"
    ),
)

DEFAULT = Rule(
    name="default",
    predicate=always,
    response=(
        "I'd be happy to help! You can ask me about:\n\n"
        "• **Getting Started** - How to begin using the platform\n"
        "• **Code Conversion** - Converting between programming languages\n"
        "• **Database Migration** - Migrating database schemas and queries\n"
        "• **Documentation** - Generating project documentation\n"
        "• **Business Logic** - Extracting logic and generating new projects\n"
        "• **Configuration** - Setting up Azure OpenAI\n"
        "• **File Upload** - How to upload files and projects\n\n"
        "What would you like to know more about?"
    ),
)

# Priority order, highest first. DEFAULT is kept separate and always last.
RULES: tuple[Rule, ...] = (
    LEGACY_CONVERSION,
    CODE_CONVERSION,
    DATABASE_CONVERSION,
    DOCUMENTATION,
    CODE_QUALITY,
    BUSINESS_LOGIC,
    PROJECT_MIGRATION,
    GETTING_STARTED,
    CONFIGURATION,
    FILE_UPLOAD,
    FEATURES,
    HELP,
)
