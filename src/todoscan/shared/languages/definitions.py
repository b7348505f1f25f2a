"""
Language definitions and metadata.

Names match the keys of the scanner's language configuration table.
"""

from pydantic import BaseModel, Field


class LanguageDefinition(BaseModel):
    """How files of a language are recognised."""

    name: str
    extensions: set[str] = Field(default_factory=set)
    filenames: set[str] = Field(default_factory=set)


# Central Registry of Language Metadata
LANGUAGE_DEFINITIONS: list[LanguageDefinition] = [
    LanguageDefinition(name="Assembly", extensions={".asm", ".a51", ".i", ".inc", ".nasm"}),
    LanguageDefinition(name="C", extensions={".c", ".h"}),
    LanguageDefinition(name="C#", extensions={".cs", ".csx", ".cake"}),
    LanguageDefinition(
        name="C++",
        extensions={".cpp", ".cc", ".cxx", ".c++", ".hpp", ".hh", ".hxx", ".h++", ".ino", ".ipp", ".tcc", ".tpp"},
    ),
    LanguageDefinition(name="Clojure", extensions={".clj", ".cljc", ".cljs", ".cljx", ".edn"}),
    LanguageDefinition(name="CoffeeScript", extensions={".coffee", ".cson", ".iced"}, filenames={"Cakefile"}),
    LanguageDefinition(
        name="Dockerfile",
        extensions={".dockerfile"},
        filenames={"Dockerfile", "Containerfile"},
    ),
    LanguageDefinition(name="Emacs Lisp", extensions={".el"}, filenames={".emacs", "_emacs"}),
    LanguageDefinition(name="Erlang", extensions={".erl", ".hrl", ".escript", ".xrl", ".yrl"}, filenames={"rebar.config"}),
    LanguageDefinition(name="Fortran", extensions={".f", ".f77", ".for", ".fpp"}),
    LanguageDefinition(name="Fortran Free Form", extensions={".f90", ".f03", ".f08", ".f95"}),
    LanguageDefinition(name="Go", extensions={".go"}),
    LanguageDefinition(name="Go Module", filenames={"go.mod"}),
    LanguageDefinition(name="Groovy", extensions={".groovy", ".gradle", ".grt", ".gtpl", ".gvy"}, filenames={"Jenkinsfile"}),
    LanguageDefinition(name="HTML", extensions={".html", ".htm", ".xht", ".xhtml"}),
    LanguageDefinition(name="Haskell", extensions={".hs", ".hs-boot", ".hsc"}),
    LanguageDefinition(
        name="JSON",
        extensions={".json", ".jsonc", ".json5", ".webmanifest", ".har"},
        filenames={".babelrc", ".eslintrc.json", "tsconfig.json", "jsconfig.json"},
    ),
    LanguageDefinition(name="Java", extensions={".java", ".jav"}),
    LanguageDefinition(name="JavaScript", extensions={".js", ".jsx", ".mjs", ".cjs"}),
    LanguageDefinition(name="Kotlin", extensions={".kt", ".ktm", ".kts"}),
    LanguageDefinition(name="Lua", extensions={".lua", ".rockspec"}),
    LanguageDefinition(name="MATLAB", extensions={".matlab"}),
    LanguageDefinition(
        name="Makefile",
        extensions={".mk", ".mak", ".make"},
        filenames={"Makefile", "makefile", "GNUmakefile", "BSDmakefile"},
    ),
    LanguageDefinition(name="Objective-C", extensions={".m"}),
    LanguageDefinition(name="PHP", extensions={".php", ".phtml", ".php3", ".php4", ".php5", ".phps", ".phpt"}),
    LanguageDefinition(name="Perl", extensions={".pl", ".pm", ".t", ".cgi", ".psgi"}),
    LanguageDefinition(name="PowerShell", extensions={".ps1", ".psd1", ".psm1"}),
    LanguageDefinition(name="Puppet", extensions={".pp"}, filenames={"Modulefile"}),
    LanguageDefinition(name="Python", extensions={".py", ".pyi", ".pyw", ".gyp", ".bzl"}, filenames={"BUILD", "WORKSPACE", "SConstruct"}),
    LanguageDefinition(name="R", extensions={".r", ".rd", ".rsx"}, filenames={".Rprofile"}),
    LanguageDefinition(
        name="Ruby",
        extensions={".rb", ".rake", ".gemspec", ".rbw", ".ru"},
        filenames={"Gemfile", "Rakefile", "Vagrantfile", "Podfile"},
    ),
    LanguageDefinition(name="Rust", extensions={".rs"}),
    LanguageDefinition(name="SQL", extensions={".sql", ".ddl", ".prc", ".tab", ".udf", ".viw"}),
    LanguageDefinition(name="Scala", extensions={".scala", ".sbt", ".sc"}),
    LanguageDefinition(
        name="Shell",
        extensions={".sh", ".bash", ".zsh", ".ksh", ".bats", ".command"},
        filenames={".bashrc", ".bash_profile", ".profile", ".zshrc"},
    ),
    LanguageDefinition(name="Swift", extensions={".swift"}),
    LanguageDefinition(name="TOML", extensions={".toml"}, filenames={"Cargo.lock", "Pipfile", "poetry.lock"}),
    LanguageDefinition(name="TeX", extensions={".tex", ".sty", ".cls", ".ltx", ".dtx", ".ins"}),
    LanguageDefinition(name="TypeScript", extensions={".ts", ".tsx", ".cts", ".mts"}),
    LanguageDefinition(name="Unix Assembly", extensions={".s", ".ms"}),
    LanguageDefinition(name="VBA", extensions={".bas", ".frm", ".vba"}),
    LanguageDefinition(name="Vim Script", extensions={".vim", ".vmb"}, filenames={".vimrc", "_vimrc", ".gvimrc"}),
    LanguageDefinition(name="Visual Basic .NET", extensions={".vb", ".vbhtml"}),
    LanguageDefinition(
        name="XML",
        extensions={".xml", ".xsd", ".xsl", ".xslt", ".svg", ".plist", ".csproj", ".pom", ".wsdl", ".xaml"},
        filenames={"pom.xml", ".classpath", ".project"},
    ),
    LanguageDefinition(name="YAML", extensions={".yml", ".yaml"}, filenames={".clang-format", ".clang-tidy"}),
]
