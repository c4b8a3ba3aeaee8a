"""
Dependency-aware pre-ordering of candidate tasks.

Blocking tasks are moved ahead of the tasks that depend on them before the
priority sort runs. The priority sort is stable, so this order only decides
between tasks that the priority comparator treats as equal.
"""

import logging
from typing import Dict, List, Set
from ..core.task import ScheduleTask

logger = logging.getLogger(__name__)


class DependencyCycleError(Exception):
    """Raised when task dependencies form a cycle."""


def build_dependency_graph(tasks: List[ScheduleTask]) -> Dict[int, List[int]]:
    """Map each task id to the ids it depends on, restricted to the given tasks."""
    known = {task.id for task in tasks}
    graph: Dict[int, List[int]] = {}
    for task in tasks:
        graph[task.id] = [dep for dep in task.depends_on if dep in known and dep != task.id]
    return graph


def topological_order(tasks: List[ScheduleTask]) -> List[ScheduleTask]:
    """
    Depth-first ordering with every blocker before its dependents.
    Raises DependencyCycleError on a cycle.
    """
    graph = build_dependency_graph(tasks)
    by_id = {task.id: task for task in tasks}
    visited: Set[int] = set()
    in_progress: Set[int] = set()
    ordered: List[ScheduleTask] = []

    def visit(task_id: int):
        if task_id in visited:
            return
        if task_id in in_progress:
            raise DependencyCycleError(f"Circular dependency involving task {task_id}")
        in_progress.add(task_id)
        for dep_id in graph[task_id]:
            visit(dep_id)
        in_progress.discard(task_id)
        visited.add(task_id)
        ordered.append(by_id[task_id])

    for task in tasks:
        visit(task.id)

    return ordered


def order_by_dependencies(tasks: List[ScheduleTask]) -> List[ScheduleTask]:
    """Topological order, or the incoming order unchanged when a cycle exists."""
    if len({task.id for task in tasks}) != len(tasks):
        logger.warning("Ignoring task dependencies: duplicate task ids in candidate set")
        return list(tasks)
    try:
        return topological_order(tasks)
    except DependencyCycleError as e:
        logger.warning(f"Ignoring task dependencies: {e}")
        return list(tasks)
