"""
测试集合

- test_aligners.py - 四种对齐模式及其不变量
- test_api.py - align() 函数契约与 TextAligner 回退行为
- test_reader.py - 行读取与模式菜单
- test_output.py - 输出格式化与填充统计
- test_cli.py - 命令行入口

运行所有测试:
  python -m pytest tests/ -v
"""
