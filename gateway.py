# gateway.py
"""
The four named read-only operations exposed to the agent.

Each call goes guard -> executor -> renderer and always ends in a string:
the rendered payload, a rejection, or "<LABEL>: <database message>".
Execution failures of any kind are returned, never raised, and nothing is retried.
"""
import logging
import textwrap
from collections import OrderedDict
from typing import Dict, List

import sql_guard
from db.client import DatabaseError, QueryExecutor
from models import Failed, OperationSpec, Outcome, Rendered, RenderMode
from renderer import NO_PLAN, render

LOG = logging.getLogger(__name__)


def _doc(text: str) -> str:
    return textwrap.dedent(text).strip()


OPERATIONS: "OrderedDict[str, OperationSpec]" = OrderedDict(
    (spec.name, spec)
    for spec in [
        OperationSpec(
            name="select_query",
            allowed_verb="SELECT",
            failure_label="QUERY_FAILED",
            render_mode=RenderMode.MARKDOWN_TABLE,
            description=_doc("""
                SELECT 쿼리를 실행하고 결과를 마크다운 테이블로 반환합니다.

                파라미터:
                - query: 실행할 SELECT 문

                반환값:
                - 성공: 마크다운 테이블 (마지막 줄에 행 수)
                - 실패: "QUERY_FAILED: {에러 메시지}"

                예시:
                - "SELECT * FROM member LIMIT 10"
                - "SELECT id, name FROM team WHERE season = '024'"
            """),
        ),
        OperationSpec(
            name="explain_query",
            allowed_verb="SELECT",
            failure_label="EXPLAIN_FAILED",
            render_mode=RenderMode.MARKDOWN_TABLE,
            wrap_prefix="EXPLAIN",
            empty_text=NO_PLAN,
            description=_doc("""
                SELECT 쿼리의 실행 계획(EXPLAIN)을 조회합니다. 인덱스 사용 여부 확인에 씁니다.

                파라미터:
                - query: 분석할 SELECT 문

                반환값:
                - 성공: 실행 계획 마크다운 테이블
                - 실패: "EXPLAIN_FAILED: {에러 메시지}"

                컬럼 참고:
                - type: ALL(풀스캔) < index < range < ref < eq_ref < const
                - key: 사용된 인덱스 (NULL이면 미사용)
                - rows: 예상 스캔 행 수
                - Extra: Using index, Using filesort, Using temporary
            """),
        ),
        OperationSpec(
            name="explain_analyze_query",
            allowed_verb="SELECT",
            failure_label="EXPLAIN_ANALYZE_FAILED",
            render_mode=RenderMode.FLATTENED_FIRST_COLUMN,
            wrap_prefix="EXPLAIN ANALYZE",
            description=_doc("""
                쿼리를 실제로 실행해서 실행 계획과 실측 시간을 보여줍니다. (MySQL 8.0.18+)

                파라미터:
                - query: 분석할 SELECT 문

                반환값:
                - 성공: 트리 형태의 실행 계획 텍스트 (실제 시간, 행 수 포함)
                - 실패: "EXPLAIN_ANALYZE_FAILED: {에러 메시지}"

                주의: 쿼리가 실제로 실행되므로 무거운 쿼리에는 쓰지 마세요.
            """),
        ),
        OperationSpec(
            name="show_query",
            allowed_verb="SHOW",
            failure_label="SHOW_FAILED",
            render_mode=RenderMode.MARKDOWN_TABLE,
            description=_doc("""
                SHOW 명령을 실행하고 결과를 마크다운 테이블로 반환합니다.

                파라미터:
                - query: 실행할 SHOW 문

                반환값:
                - 성공: 마크다운 테이블
                - 실패: "SHOW_FAILED: {에러 메시지}"

                예시:
                - "SHOW TABLES"
                - "SHOW CREATE TABLE member"
                - "SHOW INDEX FROM member"
                - "SHOW TABLE STATUS LIKE 'member'"
            """),
        ),
    ]
)


class UnknownOperation(KeyError):
    pass


class QueryGateway:
    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    def run(self, name: str, query: str) -> Outcome:
        spec = OPERATIONS.get(name)
        if spec is None:
            raise UnknownOperation(name)

        if not isinstance(query, str) or not sql_guard.check(query, spec.allowed_verb):
            LOG.info("%s rejected: leading verb is not %s", name, spec.allowed_verb)
            return Failed(spec.failure_label, sql_guard.rejection_reason(spec.allowed_verb))

        statement = spec.build_statement(query.strip())
        try:
            rows = self.executor.execute(statement)
            return Rendered(render(rows, spec.render_mode, spec.empty_text))
        except DatabaseError as e:
            LOG.warning("%s failed: %s", name, e.message)
            return Failed(spec.failure_label, e.message)
        except Exception as e:
            LOG.exception("%s failed unexpectedly", name)
            return Failed(spec.failure_label, str(e))

    def invoke(self, name: str, query: str) -> str:
        return self.run(name, query).text

    def select_query(self, query: str) -> str:
        return self.invoke("select_query", query)

    def explain_query(self, query: str) -> str:
        return self.invoke("explain_query", query)

    def explain_analyze_query(self, query: str) -> str:
        return self.invoke("explain_analyze_query", query)

    def show_query(self, query: str) -> str:
        return self.invoke("show_query", query)

    def describe(self) -> List[Dict]:
        return [
            {
                "name": spec.name,
                "description": spec.description,
                "parameters": [
                    {"name": "query", "type": "string", "description": f"실행할 {spec.allowed_verb} 문"},
                ],
            }
            for spec in OPERATIONS.values()
        ]
