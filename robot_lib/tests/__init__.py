"""
测试模块

此模块仅用于测试，不应在生产代码中使用。

包含:
- fixtures/: 测试夹具 (假时钟、记录型诊断输出、可控耗时任务)
- test_*.py: 各种测试文件

注意:
=====
- 生产代码不应导入此模块
- 所有计时相关测试使用注入的 FakeClock，不依赖真实 sleep
"""
