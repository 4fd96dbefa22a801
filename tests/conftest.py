"""Pytest configuration and shared fixtures."""

import pytest

from jardoc.code_structure.models import FieldRecord, MethodRecord, SourceUnit

TEST_CLASS_SOURCE = """package com.example;

import java.util.List;
import java.util.ArrayList;

public class TestClass extends BaseClass implements Runnable {
    private String name;
    private List<String> items;

    public void run() {
        System.out.println("Running");
        items.add("test");
    }

    public void processItems() {
        items.forEach(System.out::println);
    }
}"""

SERVICE_CLASS_SOURCE = """package com.example.service;

public class ServiceClass {
    private DatabaseHelper dbHelper;

    public void saveData(String data) {
        dbHelper.connect();
        dbHelper.save(data);
        dbHelper.disconnect();
    }

    public String loadData(int id) {
        dbHelper.connect();
        String result = dbHelper.load(id);
        dbHelper.disconnect();
        return result;
    }
}"""


@pytest.fixture
def test_class_unit() -> SourceUnit:
    """Unit with inheritance, interface, imports and calls.

    Returns:
        SourceUnit for ``TestClass`` with caller-supplied method/field records.
    """
    return SourceUnit(
        class_name="TestClass",
        package_name="com.example",
        source_code=TEST_CLASS_SOURCE,
        methods=[
            MethodRecord(name="run", return_type="void"),
            MethodRecord(name="processItems", return_type="void"),
        ],
        fields=[
            FieldRecord(name="name", type="String"),
            FieldRecord(name="items", type="List<String>"),
        ],
    )


@pytest.fixture
def service_class_unit() -> SourceUnit:
    """Unit with one field dependency and six calls.

    Returns:
        SourceUnit for ``ServiceClass``.
    """
    return SourceUnit(
        class_name="ServiceClass",
        package_name="com.example.service",
        source_code=SERVICE_CLASS_SOURCE,
        methods=[
            MethodRecord(name="saveData", return_type="void"),
            MethodRecord(name="loadData", return_type="String"),
        ],
        fields=[FieldRecord(name="dbHelper", type="DatabaseHelper")],
    )
