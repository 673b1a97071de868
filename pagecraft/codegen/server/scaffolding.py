"""Project scaffolding files rendered with Jinja2.

Each scaffold file is a small Jinja2 template rendered against a context
built from :class:`~pagecraft.config.ServerProjectOptions` and the page
routes.  Rendering errors are reported as :class:`ExportIOError` naming
the file that failed.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError

from ...errors import ExportIOError


@dataclass(frozen=True)
class RouteSpec:
    """One page route handled by the generated controller."""

    page_name: str
    path: str
    template_name: str
    method_name: str


def _java_string(value: Any) -> str:
    return json.dumps(str(value), ensure_ascii=False)


def _xml_text(value: Any) -> str:
    return str(value).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


_ENV = Environment(
    loader=BaseLoader(),
    autoescape=False,  # generating source files, not HTML
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)
_ENV.filters["java_string"] = _java_string
_ENV.filters["xml"] = _xml_text


POM_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xsi:schemaLocation="http://maven.apache.org/POM/4.0.0
         https://maven.apache.org/xsd/maven-4.0.0.xsd">
    <modelVersion>4.0.0</modelVersion>

    <parent>
        <groupId>org.springframework.boot</groupId>
        <artifactId>spring-boot-starter-parent</artifactId>
        <version>{{ options.spring_boot_version | xml }}</version>
        <relativePath/>
    </parent>

    <groupId>{{ options.group_id | xml }}</groupId>
    <artifactId>{{ options.artifact_id | xml }}</artifactId>
    <version>{{ options.version | xml }}</version>
    <packaging>jar</packaging>
    <name>{{ options.project_name | xml }}</name>
    <description>Generated by pagecraft</description>

    <properties>
        <java.version>{{ options.java_version | xml }}</java.version>
    </properties>

    <dependencies>
        <!-- Site runtime: loads page data sources at request time -->
        <dependency>
            <groupId>dev.mainul35</groupId>
            <artifactId>site-runtime</artifactId>
            <version>{{ options.runtime_version | xml }}</version>
        </dependency>

        <dependency>
            <groupId>org.springframework.boot</groupId>
            <artifactId>spring-boot-starter-web</artifactId>
        </dependency>

        <dependency>
            <groupId>org.springframework.boot</groupId>
            <artifactId>spring-boot-starter-thymeleaf</artifactId>
        </dependency>
    </dependencies>

    <build>
        <plugins>
            <plugin>
                <groupId>org.springframework.boot</groupId>
                <artifactId>spring-boot-maven-plugin</artifactId>
            </plugin>
        </plugins>
    </build>
</project>
"""

APPLICATION_JAVA = """\
package {{ package_name }};

import org.springframework.boot.SpringApplication;
import org.springframework.boot.autoconfigure.SpringBootApplication;

@SpringBootApplication
public class Application {

    public static void main(String[] args) {
        SpringApplication.run(Application.class, args);
    }
}
"""

PAGE_CONTROLLER_JAVA = """\
package {{ package_name }}.controller;

import dev.mainul35.siteruntime.service.PageDataService;
import org.springframework.stereotype.Controller;
import org.springframework.ui.Model;
import org.springframework.web.bind.annotation.GetMapping;

@Controller
public class PageController {

    private final PageDataService pageDataService;

    public PageController(PageDataService pageDataService) {
        this.pageDataService = pageDataService;
    }
{% for route in routes %}

    @GetMapping({{ route.path | java_string }})
    public String {{ route.method_name }}(Model model) {
        PageDataService.PageData data = pageDataService.loadPageData({{ route.template_name | java_string }});
        model.addAttribute("page", data.getPageMeta());
        model.addAttribute("dataSources", data.getData());
        return {{ route.template_name | java_string }};
    }
{% endfor %}
}
"""

APPLICATION_PROPERTIES = """\
# {{ options.project_name }} configuration
# Generated by pagecraft

server.port={{ options.server_port }}

# API gateway used by the site runtime to fetch data sources
site.runtime.api.gateway-url=https://api.example.com
site.runtime.api.timeout-ms=30000
site.runtime.api.max-retries=3

# Database: none, jpa, mongodb
site.runtime.database.type=none
#spring.datasource.url=jdbc:mysql://localhost:3306/mysite
#spring.datasource.username=root
#spring.datasource.password=secret

# Caching
site.runtime.cache.type=memory
site.runtime.cache.default-ttl-ms=60000

# Authentication: none, social, sso
site.runtime.auth.type=none

# Thymeleaf
spring.thymeleaf.cache=false
spring.thymeleaf.prefix=classpath:/templates/
spring.thymeleaf.suffix=.html

# Logging
logging.level.dev.mainul35.siteruntime=INFO
logging.level.{{ options.group_id }}=DEBUG
"""

README_MD = """\
# {{ options.project_name }}

This Spring Boot project was generated by pagecraft.

## Pages
{% for route in routes %}
- {{ route.page_name }} ({{ route.path }})
{% endfor %}

## Getting Started

### Prerequisites
- Java {{ options.java_version }}+
- Maven 3.6+

### Running Locally
```bash
mvn spring-boot:run
```

Then open http://localhost:{{ options.server_port }} in your browser.

### Building for Production
```bash
mvn clean package
java -jar target/{{ options.artifact_id }}-{{ options.version }}.jar
```

## Configuration

Edit `src/main/resources/application.properties` to configure the API
gateway, database connection, authentication providers and caching.

## Project Structure
```
src/main/java/{{ package_path }}/
    Application.java
    controller/PageController.java
src/main/resources/
    application.properties
    pages/        page data descriptors
    templates/    page templates
    static/css/
    static/js/
```
"""

DOCKERFILE = """\
FROM eclipse-temurin:{{ options.java_version }}-jre
WORKDIR /app
COPY target/{{ options.artifact_id }}-{{ options.version }}.jar app.jar
EXPOSE {{ options.server_port }}
ENTRYPOINT ["java", "-jar", "app.jar"]
"""


def render_scaffold(filename: str, source: str, context: Dict[str, Any]) -> str:
    """Render one scaffold template; failures name ``filename``."""

    try:
        return _ENV.from_string(source).render(**context)
    except TemplateError as exc:
        raise ExportIOError(f"Failed to render {filename}: {exc}", filename=filename) from exc


def scaffold_files(context: Dict[str, Any]) -> List[Tuple[str, str]]:
    """``(archive path, content)`` pairs for every scaffold file."""

    java_root = f"src/main/java/{context['package_path']}"
    sources = [
        ("pom.xml", POM_XML),
        (f"{java_root}/Application.java", APPLICATION_JAVA),
        (f"{java_root}/controller/PageController.java", PAGE_CONTROLLER_JAVA),
        ("src/main/resources/application.properties", APPLICATION_PROPERTIES),
        ("README.md", README_MD),
        ("Dockerfile", DOCKERFILE),
    ]
    return [(path, render_scaffold(path, source, context)) for path, source in sources]


__all__ = ["RouteSpec", "render_scaffold", "scaffold_files"]
